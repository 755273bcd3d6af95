"""Password hashing built on bcrypt."""
from __future__ import annotations

import bcrypt

# bcrypt only considers the first 72 bytes of a secret.
_BCRYPT_MAX_BYTES = 72


def _encode(raw_password: str) -> bytes:
    return raw_password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(raw_password: str, rounds: int = 10) -> str:
    """Return a salted bcrypt hash of ``raw_password``.

    Args:
        raw_password: Plain-text password as submitted by the client.
        rounds: bcrypt cost factor (log2 of the iteration count).

    Returns:
        The encoded hash, safe to persist.
    """
    return bcrypt.hashpw(_encode(raw_password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    """Return True if ``raw_password`` matches ``password_hash``.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_encode(raw_password), password_hash.encode("utf-8"))
    except ValueError:
        return False
