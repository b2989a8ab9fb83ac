import pytest
from fastapi.testclient import TestClient

from backend_platform.backend_platform.auth_service.config import Settings
from backend_platform.backend_platform.auth_service.main import create_app

from .constants import TEST_SECRET, VALID_PASSWORD


@pytest.fixture
def settings(tmp_path):
    return Settings(
        JWT_SECRET=TEST_SECRET,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_user(client):
    """A user registered through the API; returns the credentials used."""
    credentials = {"email": "a@x.com", "password": VALID_PASSWORD}
    response = client.post("/api/v1/auth/register", json=credentials)
    assert response.status_code == 201
    return credentials
