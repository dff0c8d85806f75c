"""Shared fixtures: an app with a known token and a test client."""

import pytest

from magician_api import create_app
from magician_api.config import Config

TEST_TOKEN = "test-token-123"


@pytest.fixture
def app():
    app = create_app(Config(API_TOKEN=TEST_TOKEN))
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def unconfigured_client():
    """Client for an app started without MAGICIAN_API_TOKEN."""
    app = create_app(Config(API_TOKEN=None))
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
