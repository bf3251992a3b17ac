import itertools
import os
import uuid

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_taskboard.db")

import pytest
from fastapi.testclient import TestClient

from taskboard.database import Base, engine
from taskboard.main import app
from taskboard.rate_limiter import rate_limiter


# Recreate all tables for each test
@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    rate_limiter.reset()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(client):
    """Register and log in a fresh user, returning auth headers."""
    def _make(email=None, password="Pass123!"):
        email = email or f"user_{uuid.uuid4().hex[:8]}@example.com"
        r = client.post("/auth/register", json={"email": email, "password": password})
        assert r.status_code == 200
        r = client.post("/auth/login", json={"email": email, "password": password})
        assert r.status_code == 200
        return {"Authorization": f"Bearer {r.json()['token']}"}
    return _make


@pytest.fixture
def headers(make_user):
    return make_user()


@pytest.fixture
def other_headers(make_user):
    return make_user()


@pytest.fixture
def frozen_clock(monkeypatch):
    """Stop bucket refills so limits are hit deterministically."""
    monkeypatch.setattr(rate_limiter, "_clock", lambda: 1000.0)


@pytest.fixture
def fast_clock(monkeypatch):
    """Advance an hour per rate-limit check so buckets are always full."""
    ticks = itertools.count(start=0, step=3600)
    monkeypatch.setattr(rate_limiter, "_clock", lambda: float(next(ticks)))
