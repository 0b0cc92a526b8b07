"""
Shared fixtures for the directory test-suite.

Every application gets its own in-memory SQLite database and a fake clock
that advances one second per call, so timestamps are strictly increasing.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app import create_app
from app.extensions import db

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    "RATELIMIT_ENABLED": False,
    "DIRECTORY_SEED": True,
    "DIRECTORY_VALIDATE_PARENTS": False,
}


class FakeClock:
    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


def _build_app(**overrides):
    app = create_app({**TEST_CONFIG, **overrides}, clock=FakeClock())
    return app


def _teardown(app):
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app():
    """Application seeded with the sample hierarchy."""
    app = _build_app()
    yield app
    _teardown(app)


@pytest.fixture
def empty_app():
    app = _build_app(DIRECTORY_SEED=False)
    yield app
    _teardown(app)


@pytest.fixture
def strict_app():
    """Seeded application that rejects references to missing parents."""
    app = _build_app(DIRECTORY_VALIDATE_PARENTS=True)
    yield app
    _teardown(app)


@pytest.fixture
def store(app):
    with app.app_context():
        yield app.extensions["directory_store"]


@pytest.fixture
def empty_store(empty_app):
    with empty_app.app_context():
        yield empty_app.extensions["directory_store"]


@pytest.fixture
def strict_store(strict_app):
    with strict_app.app_context():
        yield strict_app.extensions["directory_store"]


@pytest.fixture
def client(app):
    return app.test_client()
