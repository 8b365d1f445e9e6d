"""
Service-wide building blocks: error taxonomy and identity verification.
"""

from app.core.exceptions import (
    ServiceError,
    ValidationError,
    Unauthenticated,
    Forbidden,
    NotFound,
    StoreUnavailable,
)
from app.core.identity import IdentityVerifier, FirebaseIdentityVerifier, build_identity_verifier

__all__ = [
    "ServiceError",
    "ValidationError",
    "Unauthenticated",
    "Forbidden",
    "NotFound",
    "StoreUnavailable",
    "IdentityVerifier",
    "FirebaseIdentityVerifier",
    "build_identity_verifier",
]
