"""
Main entrypoint for the Travel Guide API.

This module assembles the FastAPI application: logging, the in‑memory
store, exception handlers, the access gate, request logging, the JSON
API under ``/api``, the upload endpoint, the HTML views and finally
the static files from the public directory.  ``create_app`` builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn travel_guide_api.app.main:app --reload
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from . import views
from .api.endpoints import uploads
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.security import install_access_gate
from .core.store import CollectionStore


logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        ``settings`` read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own store.
    """
    app_settings = app_settings or settings
    access_logger = setup_logging(app_settings)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.store = CollectionStore.seeded() if app_settings.seed_data else CollectionStore()

    register_exception_handlers(app)

    # Middleware added last runs first: requests are logged before the
    # gate can reject them.
    install_access_gate(app, app_settings)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        elapsed_ms = (time.time() - start_time) * 1000
        access_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(api_router, prefix="/api")
    app.include_router(uploads.router, tags=["uploads"])
    app.include_router(views.router, include_in_schema=False)

    # Static files are mounted last so that every route above wins.
    app_settings.images_path.mkdir(parents=True, exist_ok=True)
    app.mount("/", StaticFiles(directory=str(app_settings.public_path)), name="static")

    logger.info("Travel Guide API configured (public directory %s)", app_settings.public_path)
    return app


app = create_app()
