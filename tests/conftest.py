"""Shared fixtures: a fresh app, store and public directory per test."""

import pytest
from fastapi.testclient import TestClient

from travel_guide_api.app.core.config import Settings
from travel_guide_api.app.main import create_app


@pytest.fixture
def app_settings(tmp_path):
    return Settings(public_dir=str(tmp_path / "public"))


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
