"""
Base storage interface for Book Manager.

Purpose:
    Define a small, stable contract that multiple storage backends
    (in-memory, PostgreSQL) can implement without requiring changes to the
    manager or the API routes. Books are keyed by an integer id that the
    store assigns on create.

Testing & Coverage:
    These are abstract methods and are not executed directly in tests.
    We annotate them with `# pragma: no cover` so coverage tools don't
    penalize the project for un-runnable abstract declarations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

# Column / key names shared by every backend.
BOOK_FIELDS = (
    "title",
    "author",
    "year",
    "genre",
    "is_available",
    "publisher_id",
    "publisher",
    "audio_book_available",
)


class BaseBookStore(ABC):
    """Abstract base class for book storage backends."""

    @abstractmethod  # pragma: no cover
    def list_books(self) -> List[Dict[str, Any]]:
        """Return every book, ordered by id."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def get_book(self, book_id: int) -> Optional[Dict[str, Any]]:
        """
        Retrieve a book by id.

        Returns:
            Optional[Dict[str, Any]]: Mapping with 'id' plus BOOK_FIELDS, or None.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def create_book(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new book. Any 'id' in `data` is ignored.

        Returns:
            Dict[str, Any]: The stored record including its assigned id.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def update_book(self, book_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Replace every field of an existing book.

        Returns:
            Optional[Dict[str, Any]]: The updated record, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def set_availability(self, book_id: int, is_available: bool) -> Optional[Dict[str, Any]]:
        """Flip only the availability flag. Returns None if the id is unknown."""
        raise NotImplementedError

    @abstractmethod  # pragma: no cover
    def delete_book(self, book_id: int) -> bool:
        """Remove a book. Returns False if the id is unknown."""
        raise NotImplementedError
