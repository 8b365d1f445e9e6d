"""
Pydantic schemas for Movie API.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.api.models.common import ObjectIdStr
from app.database.crud import MOVIE_FIELDS


class MovieIn(BaseModel):
    """
    Request body for adding or replacing a movie.

    Every field is optional at parse time so the handler can report the
    first missing one by name. ``addedBy`` and ``movieId`` are never read
    from the client.
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    genre: str | list[str] | None = None
    releaseYear: int | str | None = None
    director: str | None = None
    cast: str | list[str] | None = None
    rating: float | None = None
    duration: int | str | None = None
    plotSummary: str | None = None
    posterUrl: str | None = None
    posterWideUrl: str | None = None
    language: str | None = None
    country: str | None = None

    def first_missing_field(self) -> str | None:
        """Name of the first required field that is absent or empty."""
        for field in MOVIE_FIELDS:
            if not getattr(self, field):
                return field
        return None

    def as_document(self) -> dict[str, Any]:
        """Required movie fields as a store document."""
        return {field: getattr(self, field) for field in MOVIE_FIELDS}


class MovieResponse(BaseModel):
    """Response model for a single movie document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    movieId: int | None = None
    title: str | None = None
    genre: Any = None
    releaseYear: Any = None
    director: str | None = None
    cast: Any = None
    rating: float | None = None
    duration: Any = None
    plotSummary: str | None = None
    posterUrl: str | None = None
    posterWideUrl: str | None = None
    language: str | None = None
    country: str | None = None
    addedBy: str | None = None


class MovieCreated(BaseModel):
    """Response for a newly added movie."""

    message: str
    movie: ObjectIdStr
    movieId: int
