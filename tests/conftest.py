"""Pytest configuration and fixtures for geohash-ranges tests."""

import pytest
from fastapi.testclient import TestClient

from geohash_ranges.config import settings
from geohash_ranges.models import Location


@pytest.fixture
def client():
    """Create a test client for the service."""
    from geohash_ranges.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def override_settings(monkeypatch):
    """Return a helper that overrides settings for the duration of a test."""

    def _override(**values):
        for name, value in values.items():
            monkeypatch.setattr(settings, name, value)

    return _override


@pytest.fixture
def tokyo():
    """Tokyo city hall."""
    return Location(lat=35.68944, lon=139.69167)
