"""
Shared test fixtures: an in-memory SQLite database and an API client bound to it.
"""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracker.infrastructure.db import models  # noqa: F401
from tracker.infrastructure.db.database import Base, get_db
from tracker.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database; StaticPool keeps one connection for all sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def ticking_clock():
    """Clock that advances one second per call, so creation order is unambiguous."""
    start = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: the startup reconnect loop is not started in tests.
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def entry_payload():
    return {
        "freelancerId": "f1",
        "project": "Website",
        "clientName": "Acme",
        "startTime": "2024-01-01T09:00:00Z",
        "endTime": "2024-01-01T11:30:00Z",
        "description": "Landing page",
        "billableRate": 100,
    }
