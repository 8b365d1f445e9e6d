"""
Unit tests for Firebase-backed token verification.

firebase_admin is never contacted: get_app and verify_id_token are
monkeypatched.
"""

import base64
import json

import pytest
from firebase_admin import auth

from app.core import identity
from app.core.exceptions import Unauthenticated


@pytest.fixture
def verifier(monkeypatch):
    monkeypatch.setattr(identity.firebase_admin, "get_app", lambda name: object())
    return identity.FirebaseIdentityVerifier({"type": "service_account"})


def test_verify_returns_email(verifier, monkeypatch):
    monkeypatch.setattr(
        identity.auth, "verify_id_token",
        lambda token, app=None: {"uid": "u1", "email": "alice@example.com"},
    )
    assert verifier.verify("good-token") == "alice@example.com"


def test_verify_invalid_token(verifier, monkeypatch):
    def reject(token, app=None):
        raise auth.InvalidIdTokenError("bad token")

    monkeypatch.setattr(identity.auth, "verify_id_token", reject)
    with pytest.raises(Unauthenticated):
        verifier.verify("bad-token")


def test_verify_expired_token(verifier, monkeypatch):
    def reject(token, app=None):
        raise auth.ExpiredIdTokenError("expired", cause=None)

    monkeypatch.setattr(identity.auth, "verify_id_token", reject)
    with pytest.raises(Unauthenticated):
        verifier.verify("old-token")


def test_verify_without_email_claim(verifier, monkeypatch):
    monkeypatch.setattr(identity.auth, "verify_id_token", lambda token, app=None: {"uid": "u1"})
    with pytest.raises(Unauthenticated):
        verifier.verify("anon-token")


def test_verify_empty_token(verifier):
    with pytest.raises(Unauthenticated):
        verifier.verify("")


def test_decode_service_key():
    info = {"type": "service_account", "project_id": "movie-master"}
    encoded = base64.b64encode(json.dumps(info).encode("utf-8")).decode("ascii")
    assert identity.decode_service_key(encoded) == info


def test_decode_service_key_rejects_garbage():
    with pytest.raises(ValueError):
        identity.decode_service_key("not base64 json")


def test_unconfigured_verifier_rejects_everything():
    verifier = identity.build_identity_verifier(None)
    with pytest.raises(Unauthenticated):
        verifier.verify("any-token")
