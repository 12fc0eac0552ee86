"""
Domain layer - Core business logic and entities.

This layer contains the entities, value objects, field validators and the
factory that is the single gate for building valid books.

It has NO dependencies on external frameworks, databases, or APIs.
"""

from .book_mapper import map_book
from .entities import Book, Publisher
from .exceptions import InvalidArgument, Reason
from .services import (
    find_by_author,
    find_by_author_and_genre,
    find_by_genre,
    find_by_publisher,
    update_next_in_series,
)
from .value_objects import Genre, ValidationRules

__all__ = [
    # Entities
    "Book",
    "Publisher",
    # Value Objects
    "Genre",
    "ValidationRules",
    # Errors
    "InvalidArgument",
    "Reason",
    # Factory
    "map_book",
    # Operations
    "update_next_in_series",
    "find_by_author",
    "find_by_genre",
    "find_by_author_and_genre",
    "find_by_publisher",
]
