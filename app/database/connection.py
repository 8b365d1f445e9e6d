"""
Document store connection management using pymongo.

A single DocumentStore is created at application start and shared by all
requests; pymongo's MongoClient maintains its own connection pool.
"""

import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.exceptions import StoreUnavailable, ValidationError

logger = logging.getLogger(__name__)


# Collection names
USERS = "users"
MOVIES = "movies"
REVIEWS = "reviews"
WATCHLISTS = "watchlists"

COLLECTIONS = (USERS, MOVIES, REVIEWS, WATCHLISTS)

DEFAULT_DB_NAME = "movie_db"


def is_valid_object_id(value) -> bool:
    """Check that a value has the primary-key shape (24 hex chars or an ObjectId)."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)


def parse_object_id(value, message: str = "Invalid movie ID format") -> ObjectId:
    """
    Convert a client-supplied id into an ObjectId.

    Raises:
        ValidationError: If the value does not have the primary-key shape
    """
    if not is_valid_object_id(value):
        raise ValidationError(message)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValidationError(message) from e


class DocumentStore:
    """
    Owner of the MongoDB client and database handle.

    Handles client creation, collection lookup, liveness checks, and shutdown.
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: str = DEFAULT_DB_NAME,
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None,
    ):
        """
        Initialize the store.

        Args:
            uri: MongoDB connection string (ignored when client is given)
            db_name: Database holding the service collections
            timeout_ms: Server selection timeout for the created client
            client: Pre-built client (e.g. mongomock in tests)
        """
        self.db_name = db_name
        if client is None:
            try:
                client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
            except PyMongoError as e:
                logger.error("MongoDB connection error: %s", e)
                raise StoreUnavailable() from e
        self.client = client
        self.db: Database = client[db_name]

    def collection(self, name: str) -> Collection:
        """Get a named collection handle."""
        return self.db[name]

    @property
    def users(self) -> Collection:
        return self.db[USERS]

    @property
    def movies(self) -> Collection:
        return self.db[MOVIES]

    @property
    def reviews(self) -> Collection:
        return self.db[REVIEWS]

    @property
    def watchlists(self) -> Collection:
        return self.db[WATCHLISTS]

    def ping(self) -> None:
        """
        Round-trip to the server.

        Raises:
            StoreUnavailable: If the server cannot be reached
        """
        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error("MongoDB connection error: %s", e)
            raise StoreUnavailable() from e

    def close(self) -> None:
        """Close the client and all pooled connections."""
        self.client.close()
