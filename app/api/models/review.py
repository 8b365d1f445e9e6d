"""
Pydantic schemas for Review API.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.api.models.common import ObjectIdStr


class ReviewCreate(BaseModel):
    """Request body for submitting a review."""

    movieId: str | None = None
    userEmail: str | None = None
    comment: str | None = None
    rating: float | None = None


class ReviewResponse(BaseModel):
    """Response model for a stored review."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    movieId: ObjectIdStr
    userEmail: str
    comment: str
    rating: float
    createdAt: datetime
