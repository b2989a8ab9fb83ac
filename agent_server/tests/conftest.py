"""
Pytest configuration for Agent Service tests.
"""
import pytest
from fastapi.testclient import TestClient

from agent_server.config import Settings
from agent_server.main import create_app


@pytest.fixture
def app():
    return create_app(Settings(LOG_LEVEL="DEBUG"))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
