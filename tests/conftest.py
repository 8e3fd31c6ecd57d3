"""Shared fixtures for all automated tests."""

from __future__ import annotations

import os

# A credential must exist before the app module reads its settings.
os.environ.setdefault("API_NINJAS_KEY", "dummy")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.moods import get_aggregator_config  # noqa: E402
from app.settings import get_settings  # noqa: E402


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_aggregator_config.cache_clear()


@pytest.fixture(autouse=True)
def _fresh_config():
    """Rebuild settings from the environment for every test."""
    _clear_caches()
    yield
    app.dependency_overrides.clear()
    _clear_caches()


@pytest.fixture()
def client():
    """Provide a TestClient for the app."""
    with TestClient(app) as c:
        yield c
