"""
Single-field validators for raw primitive inputs.

Each validator returns its input unchanged when it is valid, so the
validators can be chained directly as pipeline stages. A failure is
reported by raising InvalidArgument; nothing else has side effects.
"""

from typing import Optional

from .exceptions import InvalidArgument, Reason

VALID_ISBN_LENGTHS = (10, 13)
"""Accepted ISBN lengths once hyphens are removed (ISBN-10 and ISBN-13)"""


def strip_isbn(isbn: str) -> str:
    """Remove every hyphen from an ISBN string."""
    return isbn.replace("-", "")


def validate_non_empty_string(candidate: Optional[str], field: str = "value") -> str:
    """
    Ensure a string has at least one non-whitespace character.

    None and non-string input are rejected the same way as the empty string.

    Args:
        candidate: The raw string to check
        field: Name reported in the error

    Returns:
        The same string, unchanged

    Raises:
        InvalidArgument: With reason ``empty-or-whitespace``
    """
    if not isinstance(candidate, str) or not candidate.strip():
        raise InvalidArgument(field, Reason.EMPTY_OR_WHITESPACE)
    return candidate


def validate_positive_page_count(n: int, field: str = "page_count") -> int:
    """
    Ensure a page count is strictly greater than zero.

    Raises:
        InvalidArgument: With reason ``non-positive-page-count``
    """
    # bool is an int subclass, True must not count as one page
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(field, Reason.NON_POSITIVE_PAGE_COUNT, f"got {n!r}")
    if n <= 0:
        raise InvalidArgument(field, Reason.NON_POSITIVE_PAGE_COUNT, f"got {n}")
    return n


def validate_isbn(isbn: Optional[str], field: str = "isbn") -> str:
    """
    Ensure an ISBN has 10 or 13 characters once hyphens are removed.

    Hyphen placement is not checked and no check digit is computed; the
    stripped length is the only structural criterion.

    Returns:
        The original ISBN, hyphens included

    Raises:
        InvalidArgument: ``empty-or-whitespace`` for blank input,
            ``invalid-isbn-length`` for any other stripped length
    """
    validate_non_empty_string(isbn, field)

    stripped_length = len(strip_isbn(isbn))
    if stripped_length not in VALID_ISBN_LENGTHS:
        raise InvalidArgument(
            field,
            Reason.INVALID_ISBN_LENGTH,
            f"{stripped_length} characters without hyphens",
        )
    return isbn
