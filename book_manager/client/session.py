"""
In-memory credential holder for the book client.

Holds at most one (username, password) pair for the lifetime of the client
process. Nothing is ever written to disk.

`is_authenticated()` answers "have credentials been entered", not "are they
valid": a wrong password still reports True until the server answers 401 and
the client clears it.
"""

import threading
from typing import Optional

from auth.utils import BASIC_SCHEME, encode_basic_credentials


class CredentialStore:
    """Single-slot credential holder shared by the API client and route guard."""

    def __init__(self) -> None:
        self._username = ""
        self._password = ""
        # Bumped on every set/clear so holders can tell the pair changed.
        self._generation = 0
        self._lock = threading.Lock()

    def set_credentials(self, username: str, password: str) -> None:
        """Overwrite the held pair. No validation happens here."""
        with self._lock:
            self._username = username
            self._password = password
            self._generation += 1

    def get_auth_header_value(self) -> Optional[str]:
        """
        Return the `Authorization` header value, or None when nothing is held.

        Examples:
            >>> store = CredentialStore()
            >>> store.get_auth_header_value() is None
            True
            >>> store.set_credentials("admin", "password123")
            >>> store.get_auth_header_value()
            'Basic YWRtaW46cGFzc3dvcmQxMjM='
        """
        with self._lock:
            if not self._username:
                return None
            return f"{BASIC_SCHEME} {encode_basic_credentials(self._username, self._password)}"

    def is_authenticated(self) -> bool:
        with self._lock:
            return bool(self._username)

    def clear_credentials(self) -> None:
        with self._lock:
            self._username = ""
            self._password = ""
            self._generation += 1

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation
