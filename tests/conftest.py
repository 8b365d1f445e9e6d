"""
Shared fixtures: an in-memory MongoDB (mongomock) and a token verifier
that maps fixed tokens to emails.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.api.main import create_app
from app.core.exceptions import Unauthenticated
from app.core.identity import IdentityVerifier
from app.database.connection import DocumentStore

ALICE = "alice@example.com"
BOB = "bob@example.com"

TOKENS = {
    "alice-token": ALICE,
    "bob-token": BOB,
}


class StaticTokenVerifier(IdentityVerifier):
    """Accepts only the tokens it was built with."""

    def __init__(self, tokens):
        self.tokens = tokens

    def verify(self, token: str) -> str:
        if token not in self.tokens:
            raise Unauthenticated()
        return self.tokens[token]


@pytest.fixture
def store():
    """DocumentStore backed by a fresh in-memory client."""
    return DocumentStore(db_name="movie_db_test", client=mongomock.MongoClient())


@pytest.fixture
def client(store):
    """TestClient over an app wired to the in-memory store."""
    app = create_app(store=store, verifier=StaticTokenVerifier(TOKENS))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer alice-token"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer bob-token"}


@pytest.fixture
def movie_payload():
    """Factory for a complete movie request body."""

    def _make(**overrides):
        payload = {
            "title": "The Horizon",
            "genre": "Sci-Fi",
            "releaseYear": 2023,
            "director": "Ava Reyes",
            "cast": "Sam Lee, Nora Kim",
            "rating": 8.1,
            "duration": "1h 52m",
            "plotSummary": "A journey beyond the edge.",
            "posterUrl": "https://img.example.com/horizon.jpg",
            "posterWideUrl": "https://img.example.com/horizon-wide.jpg",
            "language": "English",
            "country": "USA",
        }
        payload.update(overrides)
        return payload

    return _make
