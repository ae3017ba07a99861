"""Shared fixtures: an in-memory database per test and an app wired to it."""

import os

# Settings are read at import time, so the test environment must be in place first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from main import create_app  # noqa: E402
from socialhub.db.session import Database  # noqa: E402

PASSWORD = "Secret123"


@pytest.fixture
def database():
    database = Database("sqlite:///:memory:")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register_user(client):
    """Factory: register a user and return ``(user, headers)``."""

    def _register(email: str, first_name: str = "Ada", last_name: str = "Lovelace", password: str = PASSWORD):
        response = client.post(
            "/api/auth/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
        )
        assert response.status_code == 201, response.text
        data = response.json()["data"]
        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _register


@pytest.fixture
def alice(register_user):
    return register_user("alice@socialhub.dev", "Alice", "Smith")


@pytest.fixture
def bob(register_user):
    return register_user("bob@socialhub.dev", "Bob", "Jones")


@pytest.fixture
def carol(register_user):
    return register_user("carol@socialhub.dev", "Carol", "White")


@pytest.fixture
def notifications_of(client):
    """Return the notifications visible to the holder of ``headers``."""

    def _notifications(headers):
        response = client.get("/api/notifications/", headers=headers)
        assert response.status_code == 200, response.text
        return response.json()["data"]["notifications"]

    return _notifications
