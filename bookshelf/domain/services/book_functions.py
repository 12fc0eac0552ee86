"""
Pure operations over Book values.

None of these functions mutate their arguments or keep state between
calls: every call builds and returns a fresh list, so the same input
collection can be shared freely between callers.
"""

from dataclasses import replace
from typing import Iterable, List

from bookshelf.domain.entities import Book
from bookshelf.domain.value_objects import Genre


def update_next_in_series(book: Book, next_in_series: str) -> Book:
    """
    Return a copy of ``book`` whose sequel is set to ``next_in_series``.

    All other fields are shared with the original, which stays unchanged
    and valid. There is no counterpart that clears the sequel.

    Args:
        book: An already valid book
        next_in_series: Title of the next book in the series

    Returns:
        A new Book differing from ``book`` only in next_in_series
    """
    return replace(book, next_in_series=next_in_series)


def find_by_author(books: Iterable[Book], author: str) -> List[Book]:
    """
    Get the books written by ``author``, in their original order.

    The comparison is exact: case-sensitive, no whitespace normalization.
    """
    return [book for book in books if book.author == author]


def find_by_genre(books: Iterable[Book], genre: Genre) -> List[Book]:
    """Get the books tagged with ``genre``, in their original order."""
    return [book for book in books if book.has_genre(genre)]


def find_by_author_and_genre(
    books: Iterable[Book],
    author: str,
    genre: Genre,
) -> List[Book]:
    """
    Get the books by ``author`` tagged with ``genre``.

    The author filter runs first and the genre filter is applied to the
    reduced set. Relative order is preserved.
    """
    return find_by_genre(find_by_author(books, author), genre)


def find_by_publisher(books: Iterable[Book], publisher: str) -> List[Book]:
    """Get the books from ``publisher`` (exact match), in their original order."""
    return [book for book in books if book.publisher == publisher]
