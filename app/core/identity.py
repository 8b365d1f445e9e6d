"""
Bearer token verification backed by Firebase Authentication.

The service only consumes the ``email`` claim of a verified ID token; that
email is the principal used for every ownership check.
"""

import base64
import json
import logging
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth, credentials

from app.core.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


class IdentityVerifier:
    """Turns a raw bearer token into a principal email."""

    def verify(self, token: str) -> str:
        raise NotImplementedError


def decode_service_key(encoded: str) -> Dict[str, Any]:
    """
    Decode a base64-encoded service account JSON document.

    Args:
        encoded: base64 text as stored in FIREBASE_SERVICE_KEY

    Returns:
        Service account info dict

    Raises:
        ValueError: If the value is not base64 JSON
    """
    try:
        return json.loads(base64.b64decode(encoded).decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        raise ValueError(f"FIREBASE_SERVICE_KEY is not base64-encoded JSON: {e}") from e


class FirebaseIdentityVerifier(IdentityVerifier):
    """
    Verifies Firebase ID tokens with firebase-admin.

    Each verifier owns a named firebase app so several instances (or a test
    process) do not collide on the default app.
    """

    APP_NAME = "movie-master-identity"

    def __init__(self, service_account: Dict[str, Any], app_name: str = APP_NAME):
        try:
            self.app = firebase_admin.get_app(app_name)
        except ValueError:
            cred = credentials.Certificate(service_account)
            self.app = firebase_admin.initialize_app(cred, name=app_name)
            logger.info("Firebase app '%s' initialized", app_name)

    @classmethod
    def from_encoded_key(cls, encoded: str) -> "FirebaseIdentityVerifier":
        return cls(decode_service_key(encoded))

    def verify(self, token: str) -> str:
        if not token:
            raise Unauthenticated()
        try:
            decoded = auth.verify_id_token(token, app=self.app)
        except (auth.InvalidIdTokenError, auth.CertificateFetchError, ValueError) as e:
            # ExpiredIdTokenError and RevokedIdTokenError subclass InvalidIdTokenError
            logger.warning("Token verification error: %s", e)
            raise Unauthenticated() from e
        email = decoded.get("email")
        if not email:
            logger.warning("Verified token carries no email claim (uid=%s)", decoded.get("uid"))
            raise Unauthenticated()
        return email


class UnconfiguredIdentityVerifier(IdentityVerifier):
    """Rejects every token; used when no service account is configured."""

    def verify(self, token: str) -> str:
        raise Unauthenticated()


def build_identity_verifier(encoded_key: Optional[str]) -> IdentityVerifier:
    """Create the verifier for the configured service account, if any."""
    if not encoded_key:
        logger.warning("FIREBASE_SERVICE_KEY not set; protected routes will return 401")
        return UnconfiguredIdentityVerifier()
    return FirebaseIdentityVerifier.from_encoded_key(encoded_key)
