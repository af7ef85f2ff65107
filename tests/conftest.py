"""Shared fixtures: a throwaway SQLite database and HTTP clients.

The database URLs are pointed at a temporary file before any application
module is imported, since engines are built at import time.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="meal-tracker-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

import pytest
from fastapi.testclient import TestClient

from database import WriteSessionLocal, drop_db, init_db
from main import app


@pytest.fixture(autouse=True)
def fresh_tables():
    """Recreate both tables so every test starts empty."""
    drop_db()
    init_db()
    yield


@pytest.fixture
def db():
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def other_client():
    """A second browser with its own cookie jar."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def registered_client(client):
    """Client that has registered once and holds a session cookie."""
    resp = client.post("/", json={"name": "Ana"})
    assert resp.status_code == 201
    return client


@pytest.fixture
def lunch():
    return {
        "name": "Lunch",
        "description": "Rice and beans",
        "date": "2024-01-01",
        "hour": "12:00",
        "type": "yes",
    }
