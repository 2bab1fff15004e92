"""
Login / logout flow for the book client.

State machine:

    LOGGED_OUT --(set credentials + successful probe)--> LOGGED_IN
    LOGGED_IN  --(logout | any 401 received)-----------> LOGGED_OUT

A login stores the credentials locally, then proves them with a real request
(list books). A 401 on that probe gives the same generic message whether the
username or the password was wrong.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .api import BookApiClient
from .navigation import BOOKS_PATH, LOGIN_PATH

log = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class SessionState(enum.Enum):
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"


@dataclass(frozen=True)
class LoginResult:
    ok: bool
    error: Optional[str] = None


class LoginFlow:
    """Drives the login view against a BookApiClient."""

    def __init__(self, api: BookApiClient, landing: str = BOOKS_PATH) -> None:
        self.api = api
        self.credentials = api.credentials
        self.navigator = api.navigator
        self.landing = landing
        # Credential generation confirmed by the last successful login.
        self._confirmed: Optional[int] = None

    @property
    def state(self) -> SessionState:
        # Any set/clear since login (including the 401 hook) drops us back to LOGGED_OUT.
        confirmed = self._confirmed is not None and self._confirmed == self.credentials.generation
        if confirmed and self.credentials.is_authenticated():
            return SessionState.LOGGED_IN
        return SessionState.LOGGED_OUT

    def login(self, username: str, password: str) -> LoginResult:
        """
        Set credentials and confirm them with a probe request.

        Returns:
            LoginResult: ok=True on success, or ok=False with a generic error.

        Raises:
            httpx.HTTPError: For failures other than 401 (credentials are cleared first).
        """
        self._confirmed = None
        if not self.navigator.is_at_login():
            self.navigator.navigate(LOGIN_PATH)
        self.credentials.set_credentials(username, password)
        generation = self.credentials.generation
        try:
            self.api.list_books()
        except httpx.HTTPStatusError as exc:
            self.credentials.clear_credentials()
            if exc.response.status_code == 401:
                return LoginResult(ok=False, error=INVALID_CREDENTIALS_MESSAGE)
            raise
        except httpx.HTTPError:
            self.credentials.clear_credentials()
            raise

        self._confirmed = generation
        log.info("Logged in")
        self.navigator.navigate(self.landing)
        return LoginResult(ok=True)

    def logout(self) -> None:
        self._confirmed = None
        self.credentials.clear_credentials()
        self.navigator.navigate(LOGIN_PATH)
