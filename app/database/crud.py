"""
CRUD operations for users, movies, reviews, and watchlist entries.

Every function takes the shared DocumentStore as its first argument and
returns raw documents (dicts with ObjectId values); shaping for the wire
happens in the API layer.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from app.database.connection import DocumentStore

logger = logging.getLogger(__name__)


# Movie fields a client must supply on create and on full update
MOVIE_FIELDS = (
    'title',
    'genre',
    'releaseYear',
    'director',
    'cast',
    'rating',
    'duration',
    'plotSummary',
    'posterUrl',
    'posterWideUrl',
    'language',
    'country',
)

# First sequential movieId handed out on an empty collection
FIRST_MOVIE_ID = 101

# Attempts at claiming a movieId before giving up
MOVIE_ID_ATTEMPTS = 3

# Size of the home page carousels
SHOWCASE_LIMIT = 6


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ==================== USER CRUD OPERATIONS ====================

def get_user_by_email(store: DocumentStore, email: str) -> Optional[Dict[str, Any]]:
    """
    Get a user by email.

    Args:
        store: Document store
        email: User email (unique key)

    Returns:
        User document or None if not found
    """
    return store.users.find_one({"email": email})


def create_user(store: DocumentStore, user: Dict[str, Any]) -> Optional[ObjectId]:
    """
    Insert a user unless one with the same email already exists.

    Args:
        store: Document store
        user: User document; must contain 'email'

    Returns:
        Inserted id, or None if the email was already registered
    """
    if get_user_by_email(store, user["email"]):
        return None
    try:
        result = store.users.insert_one(dict(user))
    except DuplicateKeyError:
        # Lost a race against a concurrent insert for the same email
        return None
    return result.inserted_id


def get_users(store: DocumentStore) -> List[Dict[str, Any]]:
    """Get all users."""
    return list(store.users.find())


def get_user_count(store: DocumentStore) -> int:
    """Get total count of users."""
    return store.users.count_documents({})


# ==================== MOVIE CRUD OPERATIONS ====================

def get_movies(store: DocumentStore) -> List[Dict[str, Any]]:
    """Get all movies."""
    return list(store.movies.find())


def get_movie_count(store: DocumentStore) -> int:
    """Get total count of movies."""
    return store.movies.count_documents({})


def get_movie(store: DocumentStore, movie_id: ObjectId) -> Optional[Dict[str, Any]]:
    """
    Get a movie by primary key.

    Args:
        store: Document store
        movie_id: Movie _id

    Returns:
        Movie document or None if not found
    """
    return store.movies.find_one({"_id": movie_id})


def search_movies_by_title(store: DocumentStore, title: str) -> List[Dict[str, Any]]:
    """
    Search for movies whose title contains the given text.

    The text is matched literally and case-insensitively.

    Args:
        store: Document store
        title: Text to look for

    Returns:
        List of matching movie documents (possibly empty)
    """
    pattern = re.escape(title)
    return list(store.movies.find({"title": {"$regex": pattern, "$options": "i"}}))


def get_movies_by_owner(store: DocumentStore, email: str) -> List[Dict[str, Any]]:
    """Get all movies added by the given user."""
    return list(store.movies.find({"addedBy": email}))


def get_movies_by_ids(store: DocumentStore, movie_ids: List[ObjectId]) -> List[Dict[str, Any]]:
    """Get all movies whose _id is in the given list."""
    if not movie_ids:
        return []
    return list(store.movies.find({"_id": {"$in": movie_ids}}))


def get_next_movie_id(store: DocumentStore) -> int:
    """
    Compute the next sequential movieId.

    Returns:
        Highest existing movieId + 1, or FIRST_MOVIE_ID on an empty collection
    """
    last = list(store.movies.find().sort("movieId", DESCENDING).limit(1))
    if not last or last[0].get("movieId") is None:
        return FIRST_MOVIE_ID
    return int(last[0]["movieId"]) + 1


def create_movie(
    store: DocumentStore,
    movie: Dict[str, Any],
    added_by: str,
) -> Tuple[ObjectId, int]:
    """
    Create a new movie with the next sequential movieId.

    The unique index on movieId rejects a concurrent insert that computed
    the same id; the id is then recomputed, up to MOVIE_ID_ATTEMPTS times.

    Args:
        store: Document store
        movie: Movie fields (see MOVIE_FIELDS)
        added_by: Owner email, stamped on the document

    Returns:
        Tuple of (inserted _id, assigned movieId)

    Raises:
        DuplicateKeyError: If every attempt collided
    """
    attempt = 0
    while True:
        attempt += 1
        movie_id = get_next_movie_id(store)
        doc = {**movie, "addedBy": added_by, "movieId": movie_id}
        try:
            result = store.movies.insert_one(doc)
        except DuplicateKeyError:
            if attempt >= MOVIE_ID_ATTEMPTS:
                raise
            logger.warning("movieId %d taken concurrently, retrying (attempt %d)", movie_id, attempt)
            continue
        logger.info("Movie %d added by %s", movie_id, added_by)
        return result.inserted_id, movie_id


def update_movie(
    store: DocumentStore,
    movie_id: ObjectId,
    movie: Dict[str, Any],
    added_by: str,
) -> bool:
    """
    Replace a movie's editable fields and re-stamp its owner.

    Fields are set, never removed; _id and movieId are left untouched.

    Returns:
        True if a document matched, False otherwise
    """
    fields = {k: v for k, v in movie.items() if k not in ("_id", "movieId")}
    fields["addedBy"] = added_by
    result = store.movies.update_one({"_id": movie_id}, {"$set": fields})
    if result.matched_count:
        logger.info("Movie %s updated by %s", movie_id, added_by)
    return result.matched_count > 0


def delete_movie(store: DocumentStore, movie_id: ObjectId, owner: str) -> bool:
    """
    Delete a movie owned by the given user.

    Returns:
        True if deleted, False if it does not exist or belongs to someone else
    """
    result = store.movies.delete_one({"_id": movie_id, "addedBy": owner})
    if result.deleted_count:
        logger.info("Movie %s deleted by %s", movie_id, owner)
    return result.deleted_count > 0


def get_movies_sorted(
    store: DocumentStore,
    field: str,
    direction: int = ASCENDING,
    limit: int = SHOWCASE_LIMIT,
) -> List[Dict[str, Any]]:
    """
    Get movies ordered by one field.

    Args:
        store: Document store
        field: Sort key
        direction: ASCENDING or DESCENDING
        limit: Maximum number of movies to return

    Returns:
        List of movie documents
    """
    return list(store.movies.find().sort(field, direction).limit(limit))


# ==================== REVIEW CRUD OPERATIONS ====================

def get_reviews_for_movie(store: DocumentStore, movie_id: ObjectId) -> List[Dict[str, Any]]:
    """Get reviews for a movie, newest first."""
    return list(store.reviews.find({"movieId": movie_id}).sort("createdAt", DESCENDING))


def create_review(
    store: DocumentStore,
    movie_id: ObjectId,
    user_email: str,
    comment: str,
    rating: float,
) -> ObjectId:
    """
    Create a review stamped with the current time.

    Returns:
        Inserted review _id
    """
    review = {
        "movieId": movie_id,
        "userEmail": user_email,
        "comment": comment,
        "rating": float(rating),
        "createdAt": _now(),
    }
    return store.reviews.insert_one(review).inserted_id


# ==================== WATCHLIST CRUD OPERATIONS ====================

def get_watchlist_entry(
    store: DocumentStore,
    movie_id: ObjectId,
    user_email: str,
) -> Optional[Dict[str, Any]]:
    """Get the watchlist entry for a (movie, user) pair, if any."""
    return store.watchlists.find_one({"movieId": movie_id, "userEmail": user_email})


def add_watchlist_entry(
    store: DocumentStore,
    movie_id: ObjectId,
    user_email: str,
) -> Optional[ObjectId]:
    """
    Add a movie to a user's watchlist.

    Returns:
        Inserted entry _id, or None if the pair was already present
    """
    if get_watchlist_entry(store, movie_id, user_email):
        return None
    entry = {"movieId": movie_id, "userEmail": user_email, "addedAt": _now()}
    try:
        inserted_id = store.watchlists.insert_one(entry).inserted_id
    except DuplicateKeyError:
        return None
    logger.info("Movie %s added to watchlist of %s", movie_id, user_email)
    return inserted_id


def get_watchlist_movies(store: DocumentStore, user_email: str) -> List[Dict[str, Any]]:
    """Get the movies referenced by a user's watchlist entries."""
    entries = store.watchlists.find({"userEmail": user_email})
    return get_movies_by_ids(store, [e["movieId"] for e in entries])


def remove_watchlist_entry(store: DocumentStore, movie_id: ObjectId, user_email: str) -> bool:
    """
    Remove a movie from a user's watchlist.

    Returns:
        True if an entry was removed, False if none existed
    """
    result = store.watchlists.delete_one({"movieId": movie_id, "userEmail": user_email})
    if result.deleted_count:
        logger.info("Movie %s removed from watchlist of %s", movie_id, user_email)
    return result.deleted_count > 0
