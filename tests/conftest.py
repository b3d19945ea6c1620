import mongomock
import pytest
from fastapi.testclient import TestClient

import portfolio_store
from api.security import create_access_token
from app import app


# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def mongo_client(monkeypatch):
    """Every test gets a fresh in-memory MongoDB behind the store."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(portfolio_store, "_client", client)
    monkeypatch.setenv("MONGODB_DB", "portfolio_test")
    portfolio_store.ensure_indexes()
    yield client
    client.close()


@pytest.fixture
def db(mongo_client):
    return mongo_client["portfolio_test"]


# -----------------------------------------------------------------------------
# HTTP
# -----------------------------------------------------------------------------
@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def session_headers():
    def _headers(user_id: str = "admin-user", email: str | None = "admin@example.com") -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(user_id, email)}"}

    return _headers


@pytest.fixture
def auth_headers(session_headers):
    return session_headers()
