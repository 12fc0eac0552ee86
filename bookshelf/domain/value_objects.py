"""
Value objects for the domain layer.

Value objects are immutable objects that represent descriptive aspects
of the domain with no conceptual identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Genre(Enum):
    """Closed set of literary categories a book can be tagged with."""

    Biography = "biography"
    Horror = "horror"
    Drama = "drama"
    Fantasy = "fantasy"
    Fiction = "fiction"
    History = "history"
    Mystery = "mystery"
    Romance = "romance"
    ScienceFiction = "science-fiction"
    Thriller = "thriller"

    @classmethod
    def parse(cls, raw: Union[str, "Genre"]) -> "Genre":
        """
        Resolve a genre from its member name or its value.

        Matching is case-insensitive, so "horror", "Horror" and "HORROR"
        all resolve to Genre.Horror.

        Raises:
            ValueError: If nothing matches
        """
        if isinstance(raw, Genre):
            return raw

        wanted = raw.strip().lower()
        for genre in cls:
            if genre.name.lower() == wanted or genre.value == wanted:
                return genre

        raise ValueError(f"Unknown genre '{raw}'")


@dataclass(frozen=True)
class ValidationRules:
    """
    Optional validation rules applied by the book factory.

    The defaults describe the canonical contract. Stricter variants are
    opted into explicitly, usually from configuration.
    """

    require_genre: bool = False
    """Whether a book must be tagged with at least one genre"""

    def is_canonical(self) -> bool:
        """Check if no optional rule is enabled."""
        return not self.require_genre
