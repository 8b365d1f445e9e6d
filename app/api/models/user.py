"""
Pydantic schemas for User API.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.api.models.common import ObjectIdStr


class UserCreate(BaseModel):
    """Request body for registering a user; extra profile fields are kept."""

    model_config = ConfigDict(extra="allow")

    email: str | None = None
    name: str | None = None
    image: str | None = None


class UserProfile(BaseModel):
    """Public profile returned to the user themself."""

    image: str | None = None
    name: str | None = None


class UserResponse(BaseModel):
    """Response model for a stored user document."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: ObjectIdStr = Field(alias="_id")
    email: str
    name: str | None = None
    image: str | None = None
