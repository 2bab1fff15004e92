"""
Main API module for Book Manager.

Responsibilities:
    - Expose REST endpoints to list, read, create, replace, patch availability
      and delete books
    - Gate every request behind HTTP Basic Auth (except CORS preflights and
      the Swagger UI)
    - Report the principal the gate resolved (/api/auth/me)

Architecture:
    - App Factory pattern (create_app) for test isolation and DI: the
      credential table and the book store are both injectable.
    - Middleware order: CORS (outermost) → Basic Auth gate → routes.
    - Manager validates payloads; storage is memory or Postgres by config.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Depends, FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from auth.config import USERS
from auth.dependencies import get_current_user
from auth.middleware import BasicAuthMiddleware
from auth.schemas import UserOut
from book_manager.config import settings
from book_manager.manager.book_manager import BookManager
from book_manager.schemas import AvailabilityUpdate, Book, BookIn
from book_manager.storage.base import BaseBookStore
from book_manager.storage.storage_factory import get_storage


def create_app(
    users: Optional[Mapping[str, str]] = None,
    storage: Optional[BaseBookStore] = None,
) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        users (Mapping[str, str], optional): Credential table for the auth
            gate. Defaults to the demo table in `auth.config`.
        storage (BaseBookStore, optional): Book store. Defaults to the
            backend selected by BOOKS_STORAGE_BACKEND (memory store is seeded).

    Returns:
        FastAPI: A fully configured application instance with its own
                 credential table and store.
    """
    docs_prefix = settings.DOCS_PREFIX
    app = FastAPI(
        title="Book Manager",
        description="Tutorial book CRUD API protected by HTTP Basic Auth",
        docs_url=docs_prefix,
        openapi_url=f"{docs_prefix}/v1/swagger.json",
        swagger_ui_oauth2_redirect_url=f"{docs_prefix}/oauth2-redirect",
        redoc_url=None,
    )
    log = logging.getLogger("books")

    # basic console logging (optional)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    # ----------------------------------------------------------------
    # Per-app instances (isolated for tests, swappable for production)
    # ----------------------------------------------------------------
    if storage is None:
        storage = get_storage(settings.STORAGE_BACKEND, seed=True)
    manager = BookManager(storage=storage)
    table = USERS if users is None else users

    log.info("Book storage backend: %s", type(storage).__name__)
    log.info("Auth gate active for %d user(s); docs exempt under %s", len(table), docs_prefix)

    # Added last = outermost, so CORS answers preflights before the gate.
    app.add_middleware(BasicAuthMiddleware, users=table, docs_prefix=docs_prefix)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _found(record: Optional[Dict[str, Any]], book_id: int) -> Book:
        if record is None:
            raise HTTPException(status_code=404, detail=f"Book {book_id} not found")
        return Book(**record)

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/api/auth/me", response_model=UserOut)
    def whoami(user: str = Depends(get_current_user)) -> UserOut:
        """Return the username the auth gate attached to this request."""
        return UserOut(username=user, message="Authenticated")

    @app.get("/api/books", response_model=List[Book])
    def list_books() -> List[Book]:
        return [Book(**record) for record in manager.list_books()]

    @app.get("/api/books/{book_id}", response_model=Book)
    def get_book(book_id: int) -> Book:
        return _found(manager.get_book(book_id), book_id)

    @app.post("/api/books", response_model=Book, status_code=201)
    def create_book(req: BookIn) -> Book:
        """
        Create a book. The server assigns the id.

        Raises:
            HTTPException: 400 if title/author are blank or the year is out of range.
        """
        try:
            return Book(**manager.create_book(req.model_dump()))
        except ValueError as ve:
            raise HTTPException(status_code=400, detail=str(ve))

    @app.put("/api/books/{book_id}", response_model=Book)
    def update_book(book_id: int, req: BookIn) -> Book:
        try:
            record = manager.update_book(book_id, req.model_dump())
        except ValueError as ve:
            raise HTTPException(status_code=400, detail=str(ve))
        return _found(record, book_id)

    @app.patch("/api/books/{book_id}/availability", response_model=Book)
    def set_availability(book_id: int, req: AvailabilityUpdate) -> Book:
        return _found(manager.set_availability(book_id, req.is_available), book_id)

    @app.delete("/api/books/{book_id}", status_code=204)
    def delete_book(book_id: int) -> Response:
        if not manager.delete_book(book_id):
            raise HTTPException(status_code=404, detail=f"Book {book_id} not found")
        return Response(status_code=204)

    return app


# `uvicorn main:app --reload` and `from main import app` continue to work.
app = create_app()
