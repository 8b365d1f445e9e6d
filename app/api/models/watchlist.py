"""
Pydantic schemas for Watchlist API.
"""

from pydantic import BaseModel


class WatchlistAdd(BaseModel):
    """Request body for adding a movie to the caller's watchlist."""

    movieId: str | None = None
    userEmail: str | None = None


class WatchlistStatus(BaseModel):
    """Whether a movie is on the caller's watchlist."""

    inWatchlist: bool
