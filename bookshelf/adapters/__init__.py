"""
Adapters between the domain layer and external representations.

Records here only describe primitive shape; every Book read back from a
record is rebuilt through the domain factory.
"""

from .converters import (
    book_to_record,
    books_from_json,
    publisher_to_record,
    record_to_book,
    record_to_publisher,
)
from .schemas import BookRecord, PublisherRecord

__all__ = [
    "BookRecord",
    "PublisherRecord",
    "book_to_record",
    "record_to_book",
    "publisher_to_record",
    "record_to_publisher",
    "books_from_json",
]
