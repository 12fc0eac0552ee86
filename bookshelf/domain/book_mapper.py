"""
Factory that turns raw primitive inputs into a validated Book.

map_book is the construction entry point for the domain. It validates
fields in a fixed order and stops at the first violation:

    author -> name -> isbn -> page_count -> publisher -> (optional rules)

Either a fully valid Book is returned or InvalidArgument propagates to the
caller; no partially built object is ever observable.
"""

import logging
from typing import Iterable, Optional

from .entities import Book
from .exceptions import InvalidArgument, Reason
from .validators import (
    validate_isbn,
    validate_non_empty_string,
    validate_positive_page_count,
)
from .value_objects import Genre, ValidationRules

logger = logging.getLogger(__name__)

CANONICAL_RULES = ValidationRules()


def map_book(
    name: str,
    author: str,
    isbn: str,
    page_count: int,
    publisher: str,
    genres: Optional[Iterable[Genre]],
    rating: Optional[int] = None,
    next_in_series: Optional[str] = None,
    *,
    rules: Optional[ValidationRules] = None,
) -> Book:
    """
    Build a Book from raw arguments, failing fast on the first invalid field.

    genres, rating and next_in_series are passed through unchecked unless
    ``rules`` enables an extra check on them.

    Args:
        name: Book title
        author: Author name
        isbn: ISBN-10 or ISBN-13, hyphens allowed
        page_count: Number of pages, must be > 0
        publisher: Publisher name
        genres: Genre tags, kept in the given order; None means no genres
        rating: Optional rating
        next_in_series: Optional title of the sequel
        rules: Optional validation rules, canonical rules when None

    Returns:
        An immutable, fully validated Book

    Raises:
        InvalidArgument: For the first field that fails validation
    """
    rules = rules or CANONICAL_RULES

    try:
        validate_non_empty_string(author, "author")
        validate_non_empty_string(name, "name")
        validate_isbn(isbn, "isbn")
        validate_positive_page_count(page_count, "page_count")
        validate_non_empty_string(publisher, "publisher")

        genres = tuple(genres) if genres is not None else ()
        if rules.require_genre and not genres:
            raise InvalidArgument("genres", Reason.MISSING_GENRE, "at least one genre is required")
    except InvalidArgument as e:
        logger.debug("Rejected book %r: %s", name, e)
        raise

    book = Book(
        isbn=isbn,
        name=name,
        author=author,
        page_count=page_count,
        publisher=publisher,
        genres=genres,
        next_in_series=next_in_series,
        rating=rating,
    )
    logger.debug("Mapped book %r by %r (isbn=%s)", book.name, book.author, book.isbn)
    return book
