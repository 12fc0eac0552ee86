"""
Converters between domain entities and serializable records.

This module centralizes all conversion logic between the domain layer
and its external representations. Reading a record back never bypasses
validation: books are always rebuilt with map_book.
"""

import logging
from typing import List, Optional

from pydantic import TypeAdapter

from bookshelf.adapters.schemas import BookRecord, PublisherRecord
from bookshelf.domain.book_mapper import map_book
from bookshelf.domain.entities import Book, Publisher
from bookshelf.domain.value_objects import Genre, ValidationRules

logger = logging.getLogger(__name__)

_BOOK_RECORDS = TypeAdapter(List[BookRecord])


def book_to_record(book: Book) -> BookRecord:
    """
    Convert a domain Book to a BookRecord.

    Args:
        book: Domain Book entity

    Returns:
        Serializable record with the same eight fields
    """
    return BookRecord(
        isbn=book.isbn,
        name=book.name,
        author=book.author,
        page_count=book.page_count,
        publisher=book.publisher,
        genres=[genre.name for genre in book.genres],
        next_in_series=book.next_in_series,
        rating=book.rating,
    )


def record_to_book(record: BookRecord, rules: Optional[ValidationRules] = None) -> Book:
    """
    Rebuild a domain Book from a record through the factory.

    Raises:
        InvalidArgument: If the record does not describe a valid book
        ValueError: If a genre name is unknown
    """
    return map_book(
        record.name,
        record.author,
        record.isbn,
        record.page_count,
        record.publisher,
        [Genre.parse(name) for name in record.genres],
        record.rating,
        record.next_in_series,
        rules=rules,
    )


def publisher_to_record(publisher: Publisher) -> PublisherRecord:
    return PublisherRecord(
        name=publisher.name,
        established=publisher.established,
        founder=publisher.founder,
        books=[book_to_record(book) for book in publisher.books],
        location=publisher.location,
        parent_company=publisher.parent_company,
    )


def record_to_publisher(
    record: PublisherRecord, rules: Optional[ValidationRules] = None
) -> Publisher:
    """Rebuild a Publisher, validating each owned book through the factory."""
    return Publisher(
        name=record.name,
        established=record.established,
        founder=record.founder,
        books=tuple(record_to_book(book, rules) for book in record.books),
        location=record.location,
        parent_company=record.parent_company,
    )


def books_from_json(payload: str, rules: Optional[ValidationRules] = None) -> List[Book]:
    """
    Parse a JSON array of book records into validated books.

    The first invalid record aborts the whole load.

    Args:
        payload: JSON text, e.g. '[{"isbn": "...", ...}]'
        rules: Optional validation rules for the factory

    Returns:
        Books in the order they appear in the payload

    Raises:
        pydantic.ValidationError: If the payload has the wrong shape
        InvalidArgument: If a record does not describe a valid book
    """
    records = _BOOK_RECORDS.validate_json(payload)
    books = [record_to_book(record, rules) for record in records]
    logger.info("Loaded %d books from JSON", len(books))
    return books
