"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.kv import InMemoryKV
from app.main import create_app


@pytest.fixture
def settings():
    """Settings with the in-memory backend and no static directory"""
    return Settings(KV_BACKEND="memory", STATIC_DIR=None, SERVICE_NAME="Test API")


@pytest.fixture
def kv():
    return InMemoryKV()


@pytest.fixture
def app(settings, kv):
    return create_app(settings, kv=kv)


@pytest.fixture
def client(app):
    """Create a test client"""
    return TestClient(app)


@pytest.fixture
def create_assignment(client):
    """POST an assignment and return the created item"""
    def _create(title="Fractions", prompt="Explain 1/2+1/3", **extra):
        response = client.post("/api/assignments", json={"title": title, "prompt": prompt, **extra})
        assert response.status_code == 201, response.text
        return response.json()["item"]
    return _create
