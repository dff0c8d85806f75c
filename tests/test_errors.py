"""Tests for the app-level error handlers and the ApiError types."""

import pytest

from magician_api import create_app
from magician_api.config import Config
from magician_api.errors import BadRequest, Forbidden, InternalError, guarded

from tests.conftest import TEST_TOKEN


@pytest.fixture
def error_client():
    """App with extra routes that raise outside the per-route wrapper."""
    app = create_app(Config(API_TOKEN=TEST_TOKEN))

    @app.post("/raise/internal")
    def raise_internal():
        raise InternalError()

    @app.post("/raise/bad-request")
    def raise_bad_request():
        raise BadRequest("Missing 'thing'")

    @app.post("/raise/unexpected")
    def raise_unexpected():
        raise ValueError("boom")

    @app.post("/guarded/unexpected")
    @guarded("/guarded/unexpected")
    def guarded_unexpected():
        raise KeyError("boom")

    return app.test_client()


@pytest.fixture
def headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


class TestErrorTypes:
    def test_status_codes(self):
        assert BadRequest("x").status_code == 400
        assert Forbidden("x").status_code == 403
        assert InternalError().status_code == 500
        assert InternalError().message == "Internal server error"


class TestAppHandlers:
    def test_api_error_outside_guard_renders_json(self, error_client, headers):
        response = error_client.post("/raise/internal", headers=headers)

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}

    def test_bad_request_outside_guard(self, error_client, headers):
        response = error_client.post("/raise/bad-request", headers=headers)

        assert response.status_code == 400
        assert response.get_json() == {"error": "Missing 'thing'"}

    def test_unexpected_error_renders_internal_error(self, error_client, headers, caplog):
        response = error_client.post("/raise/unexpected", headers=headers)

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}
        assert "Unhandled error" in caplog.text

    def test_guarded_unexpected_error(self, error_client, headers, caplog):
        response = error_client.post("/guarded/unexpected", headers=headers)

        assert response.status_code == 500
        assert response.get_json() == {"error": "Internal server error"}
        assert "Error in /guarded/unexpected" in caplog.text

    def test_forbidden_rendered_by_app_handler(self, error_client):
        response = error_client.post("/raise/internal")

        assert response.status_code == 403
        assert response.get_json() == {"error": "Forbidden: Invalid or missing API token"}
