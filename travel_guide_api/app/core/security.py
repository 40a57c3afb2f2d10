"""
Shared‑secret access gate.

Requests whose path falls under ``settings.private_prefix`` must carry
the configured secret as the ``token`` query parameter.  Anything else
is answered with ``401 {"message": "Unauthorized"}`` before routing.
Requests with the right token continue through the normal routing.

No route is currently mounted under the private prefix, so an
authorised request there ends in the usual 404.  The gate stays
installed so that routes added under the prefix are protected.
"""

import hmac
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .config import Settings


logger = logging.getLogger(__name__)


def is_authorized(token: Optional[str], expected: str) -> bool:
    """Return ``True`` if ``token`` equals the shared secret."""
    if token is None:
        return False
    # Constant‑time comparison to prevent timing attacks
    return hmac.compare_digest(token.encode("utf-8"), expected.encode("utf-8"))


def is_private_path(path: str, prefix: str) -> bool:
    """Match ``prefix`` itself or anything below it, on segment boundaries."""
    prefix = prefix.rstrip("/")
    return path == prefix or path.startswith(prefix + "/")


def install_access_gate(app: FastAPI, app_settings: Settings) -> None:
    """Register the gate as an HTTP middleware on ``app``."""

    @app.middleware("http")
    async def private_gate(request: Request, call_next):
        if is_private_path(request.url.path, app_settings.private_prefix):
            if not is_authorized(request.query_params.get("token"), app_settings.access_token):
                logger.warning("Rejected unauthorised request to %s", request.url.path)
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"message": "Unauthorized"},
                )
        return await call_next(request)
