"""
Python client for the Book Manager API.

Mirrors the single-page client: an in-memory credential store, a route guard,
an API client whose hooks attach credentials and recover from 401s, and the
login flow tying them together.
"""

from .api import BookApiClient
from .login import LoginFlow, LoginResult, SessionState
from .navigation import LOGIN_PATH, Navigator, RouteGuard
from .session import CredentialStore

__all__ = [
    "BookApiClient",
    "CredentialStore",
    "LOGIN_PATH",
    "LoginFlow",
    "LoginResult",
    "Navigator",
    "RouteGuard",
    "SessionState",
]
