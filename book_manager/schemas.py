"""
Pydantic schemas for the book resource.

JSON on the wire uses camelCase (`isAvailable`, `publisherId`, ...) to match
the single-page client; Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BookIn(BaseModel):
    """Payload for creating or replacing a book."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    author: str
    year: int
    genre: str = ""
    is_available: bool = True
    publisher_id: int = 0
    publisher: str = ""
    audio_book_available: bool = False


class Book(BookIn):
    """A stored book, identified by an integer id."""
    id: int


class AvailabilityUpdate(BaseModel):
    """Payload for PATCH /api/books/{id}/availability."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_available: bool
