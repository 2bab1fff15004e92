"""
Client-side navigation and route guarding.

`Navigator` stands in for the browser location of the single-page client.
`RouteGuard` decides, before a protected view renders, whether the user may
see it; without held credentials it sends them to the login view instead.
"""

import logging
from typing import Iterable, List

from .session import CredentialStore

LOGIN_PATH = "/login"
BOOKS_PATH = "/books"

log = logging.getLogger(__name__)


class Navigator:
    """Tracks the current client location. Starts on the login view."""

    def __init__(self, initial: str = LOGIN_PATH) -> None:
        self.location = initial
        self.history: List[str] = [initial]

    def navigate(self, path: str) -> None:
        log.debug("navigate %s -> %s", self.location, path)
        self.location = path
        self.history.append(path)

    def is_at_login(self) -> bool:
        return self.location == LOGIN_PATH


class RouteGuard:
    """
    Gate navigation into protected views.

    Args:
        credentials (CredentialStore): Held-credential signal to consult.
        navigator (Navigator): Location to redirect on refusal.
        protected (Iterable[str]): Path prefixes that need a held credential.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        navigator: Navigator,
        protected: Iterable[str] = (BOOKS_PATH,),
    ) -> None:
        self.credentials = credentials
        self.navigator = navigator
        self.protected = tuple(p.rstrip("/") for p in protected)

    def is_protected(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.protected)

    def resolve(self, path: str) -> str:
        """
        Navigate to `path` if allowed, else to the login view.

        Returns:
            str: The path that ends up rendered.
        """
        if self.is_protected(path) and not self.credentials.is_authenticated():
            self.navigator.navigate(LOGIN_PATH)
            return LOGIN_PATH
        self.navigator.navigate(path)
        return path
