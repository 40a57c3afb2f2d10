"""
Logging setup for the Travel Guide server.

Two loggers are configured from ``Settings``:

* ``travel_guide_api`` receives the application's own messages (store
  changes, rejected gate requests, stored uploads) formatted as
  ``timestamp [LEVEL] name: message``.
* ``travel_guide_api.access`` receives one line per request
  (``METHOD path -> status (ms)``) in a shorter format.

Neither propagates to the root logger, so uvicorn's or a test runner's
root handlers do not print the same line twice.  ``LOG_FILE`` adds a
file handler to both; a relative path is resolved against the project
root, the same way ``PUBLIC_DIR`` is.  Calling ``setup_logging`` again
replaces the handlers installed by the previous call.
"""

import logging
from pathlib import Path
from typing import List, Optional

from .config import PROJECT_ROOT, Settings


APP_LOGGER = "travel_guide_api"
ACCESS_LOGGER = "travel_guide_api.access"

APP_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ACCESS_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed here carry this name prefix.
_HANDLER_PREFIX = "travel_guide:"


def resolve_log_path(log_file: str) -> Optional[Path]:
    """Return the absolute path for ``log_file``, or ``None`` if unset."""
    if not log_file:
        return None
    path = Path(log_file)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path.resolve()


def _build_handlers(kind: str, fmt: str, log_path: Optional[Path]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.set_name(f"{_HANDLER_PREFIX}{kind}")
        handler.setFormatter(formatter)
    return handlers


def _replace_handlers(logger: logging.Logger, handlers: List[logging.Handler]) -> None:
    for handler in list(logger.handlers):
        if (handler.get_name() or "").startswith(_HANDLER_PREFIX):
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(app_settings: Settings) -> logging.Logger:
    """Configure the application and access loggers.

    Parameters
    ----------
    app_settings : Settings
        ``log_level`` sets the level of both loggers (unknown names fall
        back to ``INFO``); ``log_file`` optionally adds a file handler.

    Returns
    -------
    logging.Logger
        The access logger used by the request logging middleware.
    """
    level = getattr(logging, app_settings.log_level.upper(), logging.INFO)
    log_path = resolve_log_path(app_settings.log_file)

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)
    app_logger.propagate = False
    _replace_handlers(app_logger, _build_handlers("app", APP_FORMAT, log_path))

    # Level is inherited from the application logger.
    access_logger = logging.getLogger(ACCESS_LOGGER)
    access_logger.propagate = False
    _replace_handlers(access_logger, _build_handlers("access", ACCESS_FORMAT, log_path))
    return access_logger
