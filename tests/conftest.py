"""Shared fixtures: an in-memory SQLite database and a client bound to it."""

import pytest
from fastapi.testclient import TestClient

from messageboard.config import Settings
from messageboard.database import Database
from messageboard.main import create_app
from messageboard.models import Message, User


@pytest.fixture
def settings():
    return Settings(_env_file=None, database_url="sqlite://", log_level="WARNING")


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def add_user(database):
    """Insert a user with the given message texts, return the new user id."""

    def _add_user(name, type_, messages=()):
        with database.session() as session:
            user = User(name=name, type=type_)
            user.messages = [Message(msg=msg) for msg in messages]
            session.add(user)
            session.commit()
            return user.id

    return _add_user


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client
