"""
Tests for password hashing and token helpers.
"""
from datetime import timedelta

from patient_portal.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    verify_token,
)


def test_hash_password_is_salted():
    first = hash_password("Secret@123")
    second = hash_password("Secret@123")

    assert first != "Secret@123"
    assert first != second


def test_verify_password_matches_only_original():
    hashed = hash_password("Secret@123")

    assert verify_password("Secret@123", hashed)
    assert not verify_password("Secret@124", hashed)


def test_verify_password_with_malformed_hash():
    assert not verify_password("Secret@123", "plaintext-not-a-hash")


def test_access_token_carries_claims():
    token = create_access_token({"id": "42"})
    payload = verify_token(token)

    assert payload["id"] == "42"
    assert "exp" in payload


def test_expired_token_is_rejected():
    token = create_access_token({"id": "42"}, expires_delta=timedelta(seconds=-1))

    assert verify_token(token) is None


def test_tampered_token_is_rejected():
    token = create_access_token({"id": "42"})
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    assert verify_token(tampered) is None
