"""
Storage factory – switch book storage backend from config
=========================================================

Centralizes selection of the storage backend (in-memory vs PostgreSQL) so the
rest of the app can stay ignorant of where books live.

- Reads environment **at call time** to avoid stale values in tests.
- Imports the DB backend **only if** the selected backend is "postgres".

Environment variables
---------------------
- BOOKS_STORAGE_BACKEND: "memory" (default) or "postgres"
- BOOKS_DB_DSN:          DSN string if backend=="postgres"
"""

from typing import Optional
import logging
import os

from book_manager.storage.base import BaseBookStore
from book_manager.storage.storage import BookStore

log = logging.getLogger(__name__)


def get_storage(backend: Optional[str] = None, **kwargs) -> BaseBookStore:
    """
    Return a BaseBookStore implementation based on configuration.

    Parameters
    ----------
    backend : str, optional
        "memory" (default) or "postgres". If omitted, reads BOOKS_STORAGE_BACKEND.
    kwargs : dict
        Extra args. `seed=True` preloads the in-memory store; for postgres,
        use dsn="...".

    Returns
    -------
    BaseBookStore-compatible instance
    """
    be = (backend or os.getenv("BOOKS_STORAGE_BACKEND", "memory")).strip().lower()
    log.debug("Selected storage backend: %r", be)

    if be == "memory":
        return BookStore(seed=kwargs.get("seed", False))

    if be == "postgres":
        dsn = kwargs.get("dsn") or os.getenv("BOOKS_DB_DSN", "")
        if not dsn:
            raise ValueError("DB_DSN is required for postgres backend (env BOOKS_DB_DSN)")
        # Local import to avoid hard dependency when not using postgres
        from book_manager.storage.db_storage import DBBookStore
        return DBBookStore(dsn=dsn)

    raise ValueError(f"Unknown storage backend: {be!r}")
