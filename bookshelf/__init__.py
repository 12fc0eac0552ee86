"""
Bookshelf - validated, immutable book entities.

Raw inputs are validated once, at construction, by the domain factory;
everything downstream works on values that are known to be valid.
"""

from .domain import (
    Book,
    Genre,
    InvalidArgument,
    Publisher,
    Reason,
    ValidationRules,
    find_by_author,
    find_by_author_and_genre,
    find_by_genre,
    find_by_publisher,
    map_book,
    update_next_in_series,
)

__version__ = "1.0.0"

__all__ = [
    "Book",
    "Genre",
    "InvalidArgument",
    "Publisher",
    "Reason",
    "ValidationRules",
    "find_by_author",
    "find_by_author_and_genre",
    "find_by_genre",
    "find_by_publisher",
    "map_book",
    "update_next_in_series",
]
