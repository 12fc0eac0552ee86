"""
Domain entities for the book catalog.

Books are immutable value types: equality is structural, and every change
produces a new Book that shares all unchanged fields with the original.
Construction normally goes through book_mapper.map_book.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .validators import (
    strip_isbn,
    validate_isbn,
    validate_non_empty_string,
    validate_positive_page_count,
)
from .value_objects import Genre


@dataclass(frozen=True)
class Book:
    """
    Represents a book in the catalog.

    This is the central entity of the domain. Every field is required, so
    there is no zero-value Book, and the field validators run again in
    __post_init__ so that no code path (dataclasses.replace included) can
    produce an invalid instance.
    """

    isbn: str
    """ISBN-10 or ISBN-13, hyphens allowed anywhere"""

    name: str
    """Book title"""

    author: str
    """Author name, matched exactly by the finders"""

    page_count: int
    """Number of pages, always > 0"""

    publisher: str
    """Publisher name"""

    genres: Tuple[Genre, ...]
    """Ordered genre tags, may be empty"""

    next_in_series: Optional[str]
    """Title of the sequel, None when no sequel is known"""

    rating: Optional[int]
    """Rating, None when unrated"""

    def __post_init__(self) -> None:
        """Validate book data in the same order as the factory."""
        validate_non_empty_string(self.author, "author")
        validate_non_empty_string(self.name, "name")
        validate_isbn(self.isbn, "isbn")
        validate_positive_page_count(self.page_count, "page_count")
        validate_non_empty_string(self.publisher, "publisher")

        # Lists are accepted for convenience but never stored
        if self.genres is None:
            object.__setattr__(self, "genres", ())
        elif not isinstance(self.genres, tuple):
            object.__setattr__(self, "genres", tuple(self.genres))

    def stripped_isbn(self) -> str:
        """Get the ISBN without hyphens."""
        return strip_isbn(self.isbn)

    def has_sequel(self) -> bool:
        """Check if the next book in the series is known."""
        return self.next_in_series is not None

    def is_rated(self) -> bool:
        return self.rating is not None

    def has_genre(self, genre: Genre) -> bool:
        return genre in self.genres


@dataclass(frozen=True)
class Publisher:
    """
    A publishing house and the books it owns.

    Containment is one-directional: the publisher holds Book values, books
    only carry the publisher's name.
    """

    name: str
    established: int
    """Founding year"""

    founder: str
    books: Tuple[Book, ...]
    location: str
    parent_company: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.books, tuple):
            object.__setattr__(self, "books", tuple(self.books))

    def with_book(self, book: Book) -> "Publisher":
        """
        Return a copy of this publisher that also owns ``book``.

        The original publisher is left unchanged.
        """
        return replace(self, books=self.books + (book,))

    def has_parent_company(self) -> bool:
        return self.parent_company is not None
