"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from farmbook.presentation.api.app import create_app
from farmbook_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # noqa: S105


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings backed by an in-memory database."""
    return Settings(
        jwt_secret=SecretStr(TEST_JWT_SECRET),
        jwt_expires_in="7d",
        database_url_override="sqlite+aiosqlite:///:memory:",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client; entering it runs the lifespan (schema creation)."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def signup_data() -> dict:
    """Valid signup payload."""
    return {
        "name": "Asha",
        "mobile": "9876543210",
        "password": "secret1",
    }


@pytest.fixture
def registered_user(test_client, signup_data) -> dict:
    """A user created through the signup endpoint."""
    response = test_client.post("/auth/signup", json=signup_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_token(test_client, registered_user, signup_data) -> str:
    """A valid bearer token for the registered user."""
    response = test_client.post(
        "/auth/login",
        json={
            "emailOrMobile": signup_data["mobile"],
            "password": signup_data["password"],
        },
    )
    assert response.status_code == 200
    return response.json()["token"]
