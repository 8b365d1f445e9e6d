"""
Pydantic schemas for API request/response validation.
"""

from app.api.models.common import MessageResponse, InsertResponse
from app.api.models.user import UserCreate, UserProfile, UserResponse
from app.api.models.movie import MovieIn, MovieResponse, MovieCreated
from app.api.models.review import ReviewCreate, ReviewResponse
from app.api.models.watchlist import WatchlistAdd, WatchlistStatus

__all__ = [
    "MessageResponse",
    "InsertResponse",
    "UserCreate",
    "UserProfile",
    "UserResponse",
    "MovieIn",
    "MovieResponse",
    "MovieCreated",
    "ReviewCreate",
    "ReviewResponse",
    "WatchlistAdd",
    "WatchlistStatus",
]
