"""
Serializable records mirroring the domain entities.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """
    Serialized form of a Book.

    Genres are stored by enum member name (e.g. "Horror").
    """

    model_config = ConfigDict(frozen=True)

    isbn: str = Field(description="ISBN-10 or ISBN-13, hyphens allowed")
    name: str = Field(description="Book title")
    author: str = Field(description="Author name")
    page_count: int = Field(description="Number of pages")
    publisher: str = Field(description="Publisher name")
    genres: list[str] = Field(default_factory=list, description="Genre member names")
    next_in_series: str | None = Field(default=None, description="Title of the sequel")
    rating: int | None = Field(default=None, description="Rating, None when unrated")


class PublisherRecord(BaseModel):
    """Serialized form of a Publisher and the books it owns."""

    model_config = ConfigDict(frozen=True)

    name: str
    established: int = Field(description="Founding year")
    founder: str
    books: list[BookRecord] = Field(default_factory=list)
    location: str
    parent_company: str | None = None
