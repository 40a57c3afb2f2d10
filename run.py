"""Entry point for the Travel Guide server.

Starts the FastAPI application with Uvicorn on the host and port from
``travel_guide_api.app.core.config.settings`` (``0.0.0.0:3000`` unless
``HOST``/``PORT`` are set).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from travel_guide_api.app.core.config import settings
from travel_guide_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://localhost:%s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
