"""
Global pytest fixtures for the Book Manager test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory, with an injected
      credential table and a seeded in-memory store
    - Provide the client-side pieces (credential store, navigator, API client)
      wired to that app
    - Provide a helper for building Basic Authorization headers

Why an app factory?
    `create_app(users=..., storage=...)` gives each test its own credential
    table and store, so no state leaks between tests.
"""

import base64

import pytest
from fastapi.testclient import TestClient

from main import create_app
from book_manager.client.api import BookApiClient
from book_manager.client.navigation import Navigator
from book_manager.client.session import CredentialStore
from book_manager.storage.storage import BookStore


@pytest.fixture
def users():
    """Credential table used by the app under test."""
    return {"admin": "password123", "user": "userpass"}


@pytest.fixture
def book_store() -> BookStore:
    """Seeded in-memory store (three books, ids 1..3)."""
    return BookStore(seed=True)


@pytest.fixture
def app(users, book_store):
    return create_app(users=users, storage=book_store)


@pytest.fixture
def client(app) -> TestClient:
    """Raw TestClient; sends only the headers a test gives it."""
    return TestClient(app)


@pytest.fixture
def basic_header():
    """Build an Authorization header dict for the given credentials."""
    def _build(username: str, password: str, scheme: str = "Basic"):
        token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        return {"Authorization": f"{scheme} {token}"}
    return _build


@pytest.fixture
def credentials() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()


@pytest.fixture
def api(app, credentials, navigator) -> BookApiClient:
    """BookApiClient talking to the test app through its own TestClient."""
    return BookApiClient(credentials, navigator, http=TestClient(app))
