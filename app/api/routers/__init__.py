"""
API route handlers.
"""

from app.api.routers import users, movies, reviews, watchlist, system

__all__ = ["users", "movies", "reviews", "watchlist", "system"]
