"""
Tests for domain exceptions.
"""

import copy
import pickle

from bookshelf.domain.exceptions import InvalidArgument, Reason


class TestInvalidArgument:
    """Tests for InvalidArgument."""

    def test_message(self):
        error = InvalidArgument("page_count", Reason.NON_POSITIVE_PAGE_COUNT, "got 0")

        assert str(error) == "page_count: non-positive-page-count (got 0)"

    def test_reason_from_string(self):
        assert InvalidArgument("isbn", "invalid-isbn-length").reason is Reason.INVALID_ISBN_LENGTH

    def test_survives_pickle(self):
        """Test that field, reason and detail are kept across pickling."""
        error = InvalidArgument("isbn", Reason.INVALID_ISBN_LENGTH, "5 characters without hyphens")

        restored = pickle.loads(pickle.dumps(error))

        assert isinstance(restored, InvalidArgument)
        assert restored.field == "isbn"
        assert restored.reason is Reason.INVALID_ISBN_LENGTH
        assert restored.detail == "5 characters without hyphens"
        assert str(restored) == str(error)

    def test_survives_copy(self):
        error = InvalidArgument("name", Reason.EMPTY_OR_WHITESPACE)

        copied = copy.copy(error)

        assert copied.field == "name"
        assert copied.detail is None
