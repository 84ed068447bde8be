import pytest
from fastapi.testclient import TestClient

from taskapi.domain.exception.task_exceptions import TaskStateError
from taskapi.domain.exception.user_exceptions import UsernameAlreadyExistsException


@pytest.fixture
def app(test_settings):
    from taskapi.infra.rest_api.main import create_app

    app = create_app(test_settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("password_hash column missing on db-host-7")

    @app.get("/stale")
    async def stale():
        raise TaskStateError("update")

    @app.get("/taken")
    async def taken():
        raise UsernameAlreadyExistsException("alice")

    return app


@pytest.fixture
def error_client(app):
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


class TestErrorHandlers:

    def test_unexpected_error_is_generic(self, error_client):
        response = error_client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "error_type": "internal_error",
            "user_message": "Internal server error",
        }
        assert "db-host-7" not in response.text

    def test_state_error_is_a_server_error(self, error_client):
        response = error_client.get("/stale")

        assert response.status_code == 500
        assert response.json()["user_message"] == "Internal server error"
        assert "without ID" not in response.text

    def test_conflict_is_a_bad_request(self, error_client):
        response = error_client.get("/taken")

        assert response.status_code == 400
        assert response.json()["error_type"] == "username_taken"

    def test_malformed_json_is_a_bad_request(self, error_client):
        response = error_client.post(
            "/api/users",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error_type"] == "validation_error"
