"""
Storage module for Book Manager (in-memory implementation).

Responsibilities:
    - Assign integer ids on create
    - List, fetch, replace, patch availability and delete books
    - Optionally start from the tutorial seed data

Design:
    - In-memory reference implementation of the BaseBookStore contract.
    - Kept simple so unit/integration tests stay fast and deterministic.
    - Route handlers run in a threadpool, so mutations hold a lock.
"""

import itertools
import threading
from typing import Any, Dict, List, Optional

from .base import BOOK_FIELDS, BaseBookStore

SEED_BOOKS: List[Dict[str, Any]] = [
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "year": 1937,
        "genre": "Fantasy",
        "is_available": True,
        "publisher_id": 1,
        "publisher": "George Allen & Unwin",
        "audio_book_available": True,
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "year": 1949,
        "genre": "Dystopian",
        "is_available": True,
        "publisher_id": 2,
        "publisher": "Secker & Warburg",
        "audio_book_available": False,
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "year": 1960,
        "genre": "Fiction",
        "is_available": False,
        "publisher_id": 3,
        "publisher": "J. B. Lippincott & Co.",
        "audio_book_available": True,
    },
]


def _pick_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    return {field: data[field] for field in BOOK_FIELDS if field in data}


class BookStore(BaseBookStore):
    def __init__(self, seed: bool = False):
        """
        Initialize empty storage, optionally loaded with SEED_BOOKS.

        Internal schema:
            self.books = {
                book_id: {"id": int, "title": str, "author": str, ...}
            }
        """
        self.books: Dict[int, Dict[str, Any]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        if seed:
            for book in SEED_BOOKS:
                self.create_book(book)

    def list_books(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(self.books[book_id]) for book_id in sorted(self.books)]

    def get_book(self, book_id: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self.books.get(book_id)
            return dict(record) if record else None

    def create_book(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a new book under the next id.

        Returns:
            Dict[str, Any]: A copy of the stored record.
        """
        with self._lock:
            book_id = next(self._ids)
            record = {"id": book_id, **_pick_fields(data)}
            self.books[book_id] = record
            return dict(record)

    def update_book(self, book_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with self._lock:
            if book_id not in self.books:
                return None
            record = {"id": book_id, **_pick_fields(data)}
            self.books[book_id] = record
            return dict(record)

    def set_availability(self, book_id: int, is_available: bool) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self.books.get(book_id)
            if record is None:
                return None
            record["is_available"] = is_available
            return dict(record)

    def delete_book(self, book_id: int) -> bool:
        with self._lock:
            return self.books.pop(book_id, None) is not None
