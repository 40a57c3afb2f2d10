"""
Application package initializer.

The application is split into a small number of layers: ``core``
(configuration, logging, the in‑memory store, the access gate and
error handlers), ``schemas`` (Pydantic models for records and request
bodies), ``services`` (CRUD logic per collection) and ``api`` (HTTP
routers).  Server‑rendered pages live in ``views``.
"""

from .main import app  # noqa: F401
