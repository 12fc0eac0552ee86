"""
Tests for converters between domain entities and records.
"""

import json

import pytest
from pydantic import ValidationError

from bookshelf.adapters.converters import (
    book_to_record,
    books_from_json,
    publisher_to_record,
    record_to_book,
    record_to_publisher,
)
from bookshelf.adapters.schemas import BookRecord, PublisherRecord
from bookshelf.domain.book_mapper import map_book
from bookshelf.domain.entities import Publisher
from bookshelf.domain.exceptions import InvalidArgument, Reason
from bookshelf.domain.value_objects import Genre, ValidationRules


def _record(**overrides):
    data = dict(
        isbn="978-3-16-148410-0",
        name="The Shining",
        author="Stephen King",
        page_count=447,
        publisher="Doubleday",
        genres=["Horror"],
    )
    data.update(overrides)
    return data


class TestBookConverters:
    """Tests for book_to_record and record_to_book."""

    def test_book_to_record(self):
        book = map_book("It", "Stephen King", "1402894627", 1100, "Viking", [Genre.Horror, Genre.Drama], 4, "Sequel")

        record = book_to_record(book)

        assert record.isbn == "1402894627"
        assert record.genres == ["Horror", "Drama"]
        assert record.rating == 4
        assert record.next_in_series == "Sequel"

    def test_record_to_book(self):
        book = record_to_book(BookRecord(**_record(genres=["horror", "science-fiction"])))

        assert book.name == "The Shining"
        assert book.genres == (Genre.Horror, Genre.ScienceFiction)
        assert book.next_in_series is None

    def test_record_to_book_goes_through_validation(self):
        """Test that a well-shaped but invalid record is rejected."""
        with pytest.raises(InvalidArgument) as exc_info:
            record_to_book(BookRecord(**_record(page_count=0)))

        assert exc_info.value.field == "page_count"

    def test_record_to_book_applies_rules(self):
        with pytest.raises(InvalidArgument) as exc_info:
            record_to_book(BookRecord(**_record(genres=[])), ValidationRules(require_genre=True))

        assert exc_info.value.reason is Reason.MISSING_GENRE

    def test_unknown_genre_name(self):
        with pytest.raises(ValueError, match="Unknown genre"):
            record_to_book(BookRecord(**_record(genres=["Cookbook"])))


class TestPublisherConverters:
    """Tests for publisher conversion."""

    def test_publisher_to_record(self):
        book = map_book("It", "Stephen King", "1402894627", 1100, "Viking", [Genre.Horror])
        publisher = Publisher(
            name="Viking",
            established=1925,
            founder="Harold K. Guinzburg",
            books=[book],
            location="New York",
            parent_company="Penguin Group",
        )

        record = publisher_to_record(publisher)

        assert record.name == "Viking"
        assert record.parent_company == "Penguin Group"
        assert record.books[0].name == "It"

    def test_record_to_publisher_validates_books(self):
        payload = {
            "name": "Viking",
            "established": 1925,
            "founder": "Harold K. Guinzburg",
            "location": "New York",
            "books": [_record(isbn="123")],
        }
        record = PublisherRecord.model_validate(payload)

        with pytest.raises(InvalidArgument, match="invalid-isbn-length"):
            record_to_publisher(record)

    def test_record_to_publisher(self):
        record = PublisherRecord(
            name="Doubleday",
            established=1897,
            founder="Frank Nelson Doubleday",
            location="New York",
            books=[BookRecord(**_record())],
        )

        publisher = record_to_publisher(record)

        assert publisher.books[0].author == "Stephen King"
        assert publisher.parent_company is None


class TestBooksFromJson:
    """Tests for books_from_json."""

    def test_loads_books_in_order(self):
        payload = json.dumps([_record(), _record(name="Carrie", genres=[])])

        books = books_from_json(payload)

        assert [book.name for book in books] == ["The Shining", "Carrie"]
        assert books[1].genres == ()

    def test_first_invalid_record_aborts(self):
        payload = json.dumps([_record(), _record(author=" ")])

        with pytest.raises(InvalidArgument) as exc_info:
            books_from_json(payload)

        assert exc_info.value.field == "author"

    def test_malformed_payload(self):
        with pytest.raises(ValidationError):
            books_from_json('[{"name": "No other fields"}]')

    def test_empty_array(self):
        assert books_from_json("[]") == []
