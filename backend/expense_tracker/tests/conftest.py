"""
Shared fixtures: an app on in-memory SQLite and standalone in-memory stores.
"""
import pytest
from fastapi.testclient import TestClient
from expense_tracker.core.config import Settings
from expense_tracker.main import create_app
from expense_tracker.stores.memory import InMemoryStore


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL="sqlite://",
        STORE_BACKEND="sql",
        STATIC_DIR="does-not-exist",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(test_settings):
    """Client for an app with a fresh database per test."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def stores():
    return InMemoryStore()


@pytest.fixture
def user_id(client):
    """Identifier of a freshly registered user."""
    response = client.post(
        "/api/users",
        json={"username": "alice", "email": "a@x.com"}
    )
    assert response.status_code == 201
    return response.json()["id"]
