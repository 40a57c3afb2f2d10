"""Travel Guide API client.

This module defines a small client wrapper around the Travel Guide REST
API.  It uses the ``requests`` library internally and exposes one method
per operation:

* destinations – :meth:`list_destinations` (with optional ``name``
  filter), :meth:`get_destination`, :meth:`create_destination`,
  :meth:`update_destination`, :meth:`delete_destination`;
* users – the same five operations without a filter;
* comments – the same five operations without a filter;
* :meth:`upload_image` – upload an image to the public images directory.

Every method returns a tuple ``(result, error)``.  On success ``error``
is ``None``; on failure ``result`` is empty and ``error`` is a dict with
``status_code`` and ``message`` (``status_code`` is ``None`` when the
request never reached the server).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TravelGuideAPI:
    """Client for interacting with the Travel Guide API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        files: Dict[str, Any] | None = None,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns ``(data, error)``.  ``data`` is the decoded JSON body, the
        raw text for non‑JSON responses, or ``None`` for empty bodies.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                files=files,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                message = response.json().get("message") or response.text
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if not response.content:
            return None, None
        if response.headers.get("content-type", "").startswith("application/json"):
            return response.json(), None
        return response.text, None

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _delete(self, path: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", path)
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Destinations
    # ------------------------------------------------------------------
    def list_destinations(self, name: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve destinations, optionally filtered by a name substring."""
        params = {"name": name} if name else None
        return self._list("/api/destinations", params=params)

    def get_destination(self, destination_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/destination/{destination_id}")

    def create_destination(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/api/destination", json_body=payload)

    def update_destination(
        self, destination_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/api/destination/{destination_id}", json_body=payload)

    def delete_destination(self, destination_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/api/destination/{destination_id}")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/users")

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/user/{user_id}")

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/api/user", json_body=payload)

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/api/user/{user_id}", json_body=payload)

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/api/user/{user_id}")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    def list_comments(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/api/comments")

    def get_comment(self, comment_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/api/comment/{comment_id}")

    def create_comment(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a comment.

        ``payload`` uses the wire names ``destinationId``, ``userId`` and
        ``text``.
        """
        return self._request("POST", "/api/comment", json_body=payload)

    def update_comment(self, comment_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/api/comment/{comment_id}", json_body=payload)

    def delete_comment(self, comment_id: Any) -> Tuple[bool, Optional[Error]]:
        return self._delete(f"/api/comment/{comment_id}")

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------
    def upload_image(self, filename: str, content: bytes) -> Tuple[Optional[str], Optional[Error]]:
        """Upload an image; it is stored on the server under ``filename``."""
        files = {"image": (filename, content, "application/octet-stream")}
        return self._request("POST", "/upload", files=files)
