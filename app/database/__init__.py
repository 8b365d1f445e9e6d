"""
Database module for the movie service.

This module provides the MongoDB connection owner, index setup, and CRUD
operations for the users, movies, reviews, and watchlists collections.
"""

from app.database.connection import (
    DocumentStore,
    USERS,
    MOVIES,
    REVIEWS,
    WATCHLISTS,
    COLLECTIONS,
    is_valid_object_id,
    parse_object_id,
)
from app.database.init_db import ensure_indexes, verify_indexes
from app.database import crud

__all__ = [
    # Connection
    'DocumentStore',
    'USERS',
    'MOVIES',
    'REVIEWS',
    'WATCHLISTS',
    'COLLECTIONS',
    'is_valid_object_id',
    'parse_object_id',
    # Initialization
    'ensure_indexes',
    'verify_indexes',
    # CRUD module
    'crud',
]
