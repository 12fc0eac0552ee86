"""
Domain services package.

Operations that derive new books or collections from existing ones
without mutating them.
"""

from .book_functions import (
    find_by_author,
    find_by_author_and_genre,
    find_by_genre,
    find_by_publisher,
    update_next_in_series,
)

__all__ = [
    "update_next_in_series",
    "find_by_author",
    "find_by_genre",
    "find_by_author_and_genre",
    "find_by_publisher",
]
