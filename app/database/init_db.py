"""
Index creation and verification.

Indexes back the uniqueness rules the service relies on: one user per
email, one movie per movieId, and one watchlist entry per (movie, user).
"""

import logging
from typing import Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from app.database.connection import DocumentStore, USERS, MOVIES, REVIEWS, WATCHLISTS

logger = logging.getLogger(__name__)


# (collection, index name, keys, unique)
INDEXES: List[Tuple[str, str, list, bool]] = [
    (USERS, "uniq_users_email", [("email", ASCENDING)], True),
    (MOVIES, "uniq_movies_movie_id", [("movieId", ASCENDING)], True),
    (MOVIES, "idx_movies_added_by", [("addedBy", ASCENDING)], False),
    (MOVIES, "idx_movies_rating", [("rating", DESCENDING)], False),
    (REVIEWS, "idx_reviews_movie_created", [("movieId", ASCENDING), ("createdAt", DESCENDING)], False),
    (WATCHLISTS, "uniq_watchlists_movie_user", [("movieId", ASCENDING), ("userEmail", ASCENDING)], True),
]


def ensure_indexes(store: DocumentStore) -> Dict[str, bool]:
    """
    Create all service indexes if they don't exist.

    An index that cannot be built (for example a unique index over legacy
    duplicates) is logged and skipped so the service still starts.

    Args:
        store: DocumentStore instance

    Returns:
        Mapping of index name to whether it is in place
    """
    results = {}
    for collection, name, keys, unique in INDEXES:
        try:
            store.collection(collection).create_index(keys, name=name, unique=unique)
            results[name] = True
        except PyMongoError as e:
            logger.warning("Could not create index %s on %s: %s", name, collection, e)
            results[name] = False
    logger.info("Indexes ensured: %d/%d", sum(results.values()), len(results))
    return results


def verify_indexes(store: DocumentStore) -> bool:
    """
    Verify that all service indexes exist.

    Args:
        store: DocumentStore instance

    Returns:
        True if every index exists, False otherwise
    """
    missing = []
    for collection, name, _keys, _unique in INDEXES:
        existing = store.collection(collection).index_information()
        if name not in existing:
            missing.append(f"{collection}.{name}")

    if missing:
        logger.warning("Missing indexes: %s", ", ".join(missing))
        return False
    return True
