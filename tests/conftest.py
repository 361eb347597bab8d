"""Pytest fixtures for storefront tests."""

from datetime import datetime

import pytest

from storefront import create_app
from storefront.config import TestConfig
from storefront.extensions import db


@pytest.fixture
def app():
    """Fresh app with an empty in-memory database."""
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Create an account and return the login response payload."""

    def _register(email="asha@example.com", name="Asha", password="secret123"):
        r = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert r.status_code == 201, r.get_json()
        r = client.post("/api/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200, r.get_json()
        return r.get_json()["data"]

    return _register


@pytest.fixture
def auth_headers(register):
    """Bearer headers for a freshly registered account."""
    token = register()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the clock used by the handlers; returns a setter."""
    state = {"now": datetime(2025, 3, 1, 12, 0, 0)}
    monkeypatch.setattr("storefront.utils.clock.utcnow", lambda: state["now"])

    def _set(value):
        state["now"] = value
        return value

    _set.current = lambda: state["now"]
    return _set
