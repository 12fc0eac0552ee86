"""
Domain exceptions.

Every validation failure in the domain layer is reported as an
InvalidArgument carrying the offending field name and a machine-checkable
reason code. It subclasses ValueError so callers that already catch
ValueError keep working.
"""

from enum import Enum
from typing import Optional


class Reason(str, Enum):
    """Reason codes attached to InvalidArgument."""

    EMPTY_OR_WHITESPACE = "empty-or-whitespace"
    NON_POSITIVE_PAGE_COUNT = "non-positive-page-count"
    INVALID_ISBN_LENGTH = "invalid-isbn-length"
    MISSING_GENRE = "missing-genre"


class InvalidArgument(ValueError):
    """Raised when a raw input cannot become part of a valid entity."""

    def __init__(self, field: str, reason: Reason, detail: Optional[str] = None) -> None:
        self.field = field
        self.reason = Reason(reason)
        self.detail = detail

        message = f"{field}: {self.reason.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.field, self.reason, self.detail))
