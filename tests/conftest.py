"""Shared test fixtures."""

import os

import pytest
from fastapi.testclient import TestClient

# in-memory store + header guard unless a test switches it
os.environ.setdefault("USE_IN_MEMORY_STORE", "true")
os.environ.setdefault("AUTH_MODE", "header")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.config import settings  # noqa: E402
from app.deps import get_store  # noqa: E402
from app.main import app  # noqa: E402
from app.repositories.entity_store import InMemoryEntityStore  # noqa: E402

ADMIN = {"user-role": "admin"}


@pytest.fixture
def store() -> InMemoryEntityStore:
    return InMemoryEntityStore()


@pytest.fixture
def client(store, monkeypatch):
    monkeypatch.setattr(settings, "AUTH_MODE", "header")
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_member(client):
    def _make(name="Ada Lovelace", email="ada@example.com", **extra):
        resp = client.post(
            "/api/team/members", json={"name": name, "email": email, **extra}, headers=ADMIN
        )
        assert resp.status_code == 200, resp.text
        return resp.json()["member"]

    return _make
