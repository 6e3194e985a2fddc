"""Tests for identity token signing and verification"""
import time

import pytest

from authtoken import AuthError, Role, TokenSigner, TokenVerifier
from jwt.utils import base64url_decode, base64url_encode


def test_round_trip_identity(signer, verifier):
    token = signer.issue("user-9", "ada", "ada@example.com", Role.ADMIN)

    identity = verifier.verify_identity(token)

    assert identity.user_id == "user-9"
    assert identity.role == Role.ADMIN
    assert identity.is_admin


def test_claims_carry_profile_and_lifetime(key_pair, verifier):
    signer = TokenSigner(private_key_pem=key_pair[0], token_ttl_seconds=3600)
    token = signer.issue("user-9", "ada", "ada@example.com", issued_at=int(time.time()))

    result = verifier.verify(token)

    assert result.is_valid
    assert result.claims.name == "ada"
    assert result.claims.email == "ada@example.com"
    assert result.claims.role == Role.USER
    assert result.claims.exp - result.claims.iat == 3600


def test_expired_token(signer, verifier):
    issued = int(time.time()) - signer.ttl_seconds - 10
    token = signer.issue("user-9", "ada", "ada@example.com", issued_at=issued)

    result = verifier.verify(token)

    assert not result.is_valid
    assert result.error_message == "Token has expired"


def test_token_from_the_future(signer, verifier):
    token = signer.issue("user-9", "ada", "ada@example.com", issued_at=int(time.time()) + 3600)

    result = verifier.verify(token)

    assert not result.is_valid
    assert result.error_message == "Token issued in the future"


def test_tampered_claims(signer, verifier):
    header, claims, signature = signer.issue("user-9", "ada", "ada@example.com").split(".")
    forged = base64url_decode(claims).replace(b'"role":"user"', b'"role":"admin"')
    token = ".".join([header, base64url_encode(forged).decode(), signature])

    result = verifier.verify(token)

    assert not result.is_valid
    assert result.error_message == "Invalid signature"


def test_signed_by_another_key(other_key_pair, verifier):
    token = TokenSigner(private_key_pem=other_key_pair[0]).issue("user-9", "ada", "ada@example.com")

    assert not verifier.verify(token).is_valid


@pytest.mark.parametrize("token", [None, "", "abc", "a.b", "a.b.c.d", "!!.??.##"])
def test_malformed_tokens(verifier, token):
    with pytest.raises(AuthError):
        verifier.verify_identity(token)


def test_unconfigured_verifier_rejects_everything(signer):
    token = signer.issue("user-9", "ada", "ada@example.com")

    result = TokenVerifier().verify(token)

    assert not result.is_valid
    assert result.identity is None


def test_rejects_non_ed25519_key():
    with pytest.raises(ValueError):
        TokenSigner(private_key_pem="not a key")
