import pytest

import seed_books
from book_manager.storage.db_storage import DBBookStore


@pytest.fixture
def calls(monkeypatch):
    recorded = []
    monkeypatch.setattr(DBBookStore, "ensure_schema", lambda self, seed=False: recorded.append((self.dsn, seed)))
    return recorded


def test_seeds_by_default(calls):
    assert seed_books.main(["--dsn", "postgresql://x@y/z"]) == 0
    assert calls == [("postgresql://x@y/z", True)]


def test_schema_only(calls):
    seed_books.main(["--dsn", "postgresql://x@y/z", "--no-seed"])
    assert calls == [("postgresql://x@y/z", False)]


def test_dsn_from_env(calls, monkeypatch):
    monkeypatch.setenv("BOOKS_DB_DSN", "postgresql://env@host/db")
    seed_books.main([])
    assert calls == [("postgresql://env@host/db", True)]


def test_missing_dsn_exits(calls, monkeypatch):
    monkeypatch.delenv("BOOKS_DB_DSN", raising=False)
    with pytest.raises(SystemExit):
        seed_books.main([])
    assert calls == []
