"""Tests for the logging setup and request logging."""

import logging

from fastapi.testclient import TestClient

from travel_guide_api.app.core.config import PROJECT_ROOT, Settings
from travel_guide_api.app.core.logging_config import (
    ACCESS_LOGGER,
    APP_LOGGER,
    resolve_log_path,
    setup_logging,
)
from travel_guide_api.app.main import create_app


def test_resolve_log_path(tmp_path):
    assert resolve_log_path("") is None
    assert resolve_log_path("logs/server.log") == (PROJECT_ROOT / "logs" / "server.log").resolve()
    absolute = tmp_path / "server.log"
    assert resolve_log_path(str(absolute)) == absolute.resolve()


def test_setup_logging_replaces_its_handlers(tmp_path):
    app_settings = Settings(public_dir=str(tmp_path / "public"), log_level="debug")
    setup_logging(app_settings)
    access_logger = setup_logging(app_settings)

    app_logger = logging.getLogger(APP_LOGGER)
    assert access_logger.name == ACCESS_LOGGER
    assert len(app_logger.handlers) == 1
    assert len(access_logger.handlers) == 1
    assert app_logger.level == logging.DEBUG
    assert access_logger.getEffectiveLevel() == logging.DEBUG
    assert not app_logger.propagate and not access_logger.propagate


def test_unknown_level_falls_back_to_info(tmp_path):
    setup_logging(Settings(public_dir=str(tmp_path / "public"), log_level="chatty"))
    assert logging.getLogger(APP_LOGGER).level == logging.INFO


def test_requests_and_changes_are_written_to_log_file(tmp_path):
    log_file = tmp_path / "logs" / "server.log"
    app_settings = Settings(public_dir=str(tmp_path / "public"), log_file=str(log_file))
    with TestClient(create_app(app_settings)) as client:
        client.post("/api/destination", json={"name": "Rome"})
        client.get("/api/private/x", params={"token": "wrong"})

    text = log_file.read_text(encoding="utf-8")
    assert "POST /api/destination -> 201" in text
    assert "Created destination 4" in text
    assert "[WARNING] travel_guide_api.app.core.security: Rejected unauthorised request" in text
    assert "GET /api/private/x -> 401" in text
