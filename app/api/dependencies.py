"""
FastAPI dependency injection for the document store and request principal.

Both the store and the identity verifier are created once per application
(see ``app.api.main.lifespan``) and read back from ``app.state``.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import StoreUnavailable, Unauthenticated
from app.core.identity import IdentityVerifier
from app.database.connection import DocumentStore

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_store(request: Request) -> DocumentStore:
    """Return the application's DocumentStore for FastAPI Depends()."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailable()
    return store


def get_identity_verifier(request: Request) -> IdentityVerifier:
    """Return the application's IdentityVerifier."""
    verifier = getattr(request.app.state, "verifier", None)
    if verifier is None:
        raise Unauthenticated()
    return verifier


def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> str:
    """
    Resolve the verified email of the caller.

    Raises:
        Unauthenticated: If the Authorization header is missing or the token
            does not verify
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return verifier.verify(credentials.credentials)
