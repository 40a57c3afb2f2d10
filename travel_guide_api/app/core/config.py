"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the values the server has always used (port 3000, the ``public``
directory for static files, the shared ``your_secret_token`` secret),
so running without any environment at all gives the stock behaviour.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from fastapi import Request


# travel_guide_api/app/core/config.py -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Travel Guide API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Shared secret checked by the access gate.  Requests under
    # ``private_prefix`` must carry it as the ``token`` query parameter.
    access_token: str = os.getenv("ACCESS_TOKEN", "your_secret_token")
    private_prefix: str = os.getenv("PRIVATE_PREFIX", "/api/private")

    # Directory served as static files.  Uploaded images are written to
    # ``<public_dir>/<images_subdir>``.  Relative paths are resolved
    # against the project root.
    public_dir: str = os.getenv("PUBLIC_DIR", "public")
    images_subdir: str = os.getenv("IMAGES_SUBDIR", "images")

    # Populate the collections with the sample destinations, users and
    # comments on startup.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}

    @property
    def public_path(self) -> Path:
        path = Path(self.public_dir)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path.resolve()

    @property
    def images_path(self) -> Path:
        return self.public_path / self.images_subdir


settings = Settings()


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the running app was built with."""
    return request.app.state.settings
