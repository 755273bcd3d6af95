# tests/test_tokens.py
"""Tests for bearer token issuing and verification."""

from datetime import timedelta

import pytest
from jose import jwt

from memberhub.core.errors import InvalidToken
from memberhub.core.tokens import TokenCodec
from memberhub.db.time import utcnow


def test_verify_returns_issued_user_id(codec) -> None:
    token = codec.issue("1234567890")
    assert codec.verify(token) == "1234567890"


def test_token_expires_one_hour_after_issuance(codec) -> None:
    issued_at = utcnow()
    token = codec.issue("42", now=issued_at)
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 3600
    assert claims["id"] == "42"


def test_token_one_hour_and_one_second_old_is_rejected(codec) -> None:
    token = codec.issue("42", now=utcnow() - timedelta(hours=1, seconds=1))
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_token_just_inside_lifetime_is_accepted(codec) -> None:
    token = codec.issue("42", now=utcnow() - timedelta(minutes=59))
    assert codec.verify(token) == "42"


def test_token_signed_with_other_key_is_rejected(codec) -> None:
    forged = TokenCodec("another-secret").issue("42")
    with pytest.raises(InvalidToken):
        codec.verify(forged)


@pytest.mark.parametrize("token", ["", "not.a.jwt", "abc", "Bearer xyz"])
def test_malformed_tokens_are_rejected(codec, token) -> None:
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_token_with_swapped_payload_is_rejected(codec) -> None:
    header, _, signature = codec.issue("42").split(".")
    _, other_payload, _ = codec.issue("43").split(".")
    with pytest.raises(InvalidToken):
        codec.verify(".".join([header, other_payload, signature]))


def test_token_without_user_id_is_rejected(test_settings, codec) -> None:
    now = utcnow()
    token = jwt.encode(
        {"sub": "42", "iat": now, "exp": now + timedelta(hours=1)},
        test_settings.secret_key,
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_codec_requires_a_signing_key() -> None:
    with pytest.raises(ValueError):
        TokenCodec("")


def test_codec_uses_configured_key_and_lifetime(test_settings) -> None:
    codec = TokenCodec.from_settings(test_settings)
    assert codec.ttl == timedelta(minutes=test_settings.access_token_expire_minutes)
    token = codec.issue("7")
    assert jwt.decode(token, test_settings.secret_key, algorithms=["HS256"])["id"] == "7"
