"""
BookManager module for Book Manager.

Responsibilities:
    - Validate book payloads before they reach storage
    - Delegate CRUD and availability changes to the injected store

Design notes:
    - Validation errors raise ValueError; the API maps them to 400.
    - Missing ids come back as None/False; the API maps them to 404.
    - Storage is an injected dependency, so memory and Postgres backends are
      interchangeable.
"""

import datetime
from typing import Any, Dict, List, Optional

from ..storage.base import BaseBookStore

MIN_YEAR = 0


class BookManager:
    """Coordinates validation and storage calls for books."""

    def __init__(self, storage: BaseBookStore):
        self.storage = storage

    # ---------------------------------------------------------------------
    # Validation Helpers
    # ---------------------------------------------------------------------
    def _validate(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Check required text fields and the publication year.

        Returns:
            Dict[str, Any]: The payload with title/author stripped.

        Raises:
            ValueError: If title or author is blank, or the year is out of range.
        """
        title = (data.get("title") or "").strip()
        author = (data.get("author") or "").strip()
        if not title:
            raise ValueError("Title is required")
        if not author:
            raise ValueError("Author is required")

        max_year = datetime.date.today().year + 1
        year = data.get("year")
        if not isinstance(year, int) or not MIN_YEAR <= year <= max_year:
            raise ValueError(f"Year must be between {MIN_YEAR} and {max_year}")

        return {**data, "title": title, "author": author}

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------
    def list_books(self) -> List[Dict[str, Any]]:
        return self.storage.list_books()

    def get_book(self, book_id: int) -> Optional[Dict[str, Any]]:
        return self.storage.get_book(book_id)

    def create_book(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and store a new book.

        Raises:
            ValueError: On invalid payload.
        """
        return self.storage.create_book(self._validate(data))

    def update_book(self, book_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Validate and replace an existing book.

        Returns:
            Optional[Dict[str, Any]]: Updated record, or None if the id is unknown.

        Raises:
            ValueError: On invalid payload.
        """
        return self.storage.update_book(book_id, self._validate(data))

    def set_availability(self, book_id: int, is_available: bool) -> Optional[Dict[str, Any]]:
        return self.storage.set_availability(book_id, is_available)

    def delete_book(self, book_id: int) -> bool:
        return self.storage.delete_book(book_id)
