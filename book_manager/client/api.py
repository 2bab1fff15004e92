"""
HTTP client for the Book Manager API.

Responsibilities:
    - Attach the held Basic credential to every outbound request
    - Globally react to 401 responses: drop the credential and send the user
      to the login view (unless already there)
    - Wrap the book endpoints in typed methods

Both behaviours are httpx event hooks, so they fire for every request made
through the client no matter which method issued it. Non-2xx responses
surface as `httpx.HTTPStatusError`; nothing is retried.
"""

import logging
from typing import List, Optional

import httpx

from book_manager.config import settings
from book_manager.schemas import Book, BookIn

from .navigation import LOGIN_PATH, Navigator
from .session import CredentialStore

log = logging.getLogger(__name__)


class BookApiClient:
    """
    Book API client bound to one credential store and one navigator.

    Args:
        credentials (CredentialStore): Source of the Authorization header.
        navigator (Navigator): Location to reset on 401.
        base_url (str, optional): API root. Defaults to BOOKS_API_BASE_URL.
        http (httpx.Client, optional): Pre-built client (e.g. a FastAPI
            TestClient). The hooks are added to it.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        navigator: Navigator,
        base_url: Optional[str] = None,
        http: Optional[httpx.Client] = None,
    ) -> None:
        self.credentials = credentials
        self.navigator = navigator
        self.http = http or httpx.Client(base_url=base_url or settings.API_BASE_URL)

        hooks = self.http.event_hooks
        hooks.setdefault("request", []).append(self._attach_credentials)
        hooks.setdefault("response", []).append(self._handle_unauthorized)
        self.http.event_hooks = hooks

    # ---------------------------------------------------------------------
    # Interceptors
    # ---------------------------------------------------------------------
    def _attach_credentials(self, request: httpx.Request) -> None:
        header = self.credentials.get_auth_header_value()
        if header:
            request.headers["Authorization"] = header
        else:
            request.headers.pop("Authorization", None)

    def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return
        if self.navigator.is_at_login():
            return
        log.info("Received 401 from %s; clearing credentials", response.request.url.path)
        self.credentials.clear_credentials()
        self.navigator.navigate(LOGIN_PATH)

    # ---------------------------------------------------------------------
    # Book endpoints
    # ---------------------------------------------------------------------
    def list_books(self) -> List[Book]:
        resp = self.http.get("/api/books")
        resp.raise_for_status()
        return [Book.model_validate(item) for item in resp.json()]

    def get_book(self, book_id: int) -> Book:
        resp = self.http.get(f"/api/books/{book_id}")
        resp.raise_for_status()
        return Book.model_validate(resp.json())

    def create_book(self, book: BookIn) -> Book:
        resp = self.http.post("/api/books", json=book.model_dump(by_alias=True))
        resp.raise_for_status()
        return Book.model_validate(resp.json())

    def update_book(self, book_id: int, book: BookIn) -> Book:
        resp = self.http.put(f"/api/books/{book_id}", json=book.model_dump(by_alias=True))
        resp.raise_for_status()
        return Book.model_validate(resp.json())

    def set_availability(self, book_id: int, is_available: bool) -> Book:
        resp = self.http.patch(f"/api/books/{book_id}/availability", json={"isAvailable": is_available})
        resp.raise_for_status()
        return Book.model_validate(resp.json())

    def delete_book(self, book_id: int) -> None:
        resp = self.http.delete(f"/api/books/{book_id}")
        resp.raise_for_status()

    def close(self) -> None:
        self.http.close()
