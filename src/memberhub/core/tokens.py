"""Bearer token issuing and verification.

Tokens are HMAC-signed JWTs carrying the user id under the ``id`` claim and
an expiry a fixed interval after issuance. The signing key always comes from
the process settings.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from jose import JWTError, jwt

from memberhub.core.errors import InvalidToken
from memberhub.core.settings import Settings
from memberhub.db.time import utcnow

DEFAULT_TOKEN_TTL = timedelta(hours=1)


class TokenCodec:
    """Issue and verify signed, time-limited identity claims."""

    def __init__(
        self,
        secret_key: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        if not secret_key:
            raise ValueError("A signing key is required")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> TokenCodec:
        """Build a codec keyed by the configured secret."""
        return cls(
            settings.secret_key,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.access_token_expire_minutes),
        )

    def issue(self, user_id: str, *, now: datetime | None = None) -> str:
        """Return a signed token for ``user_id`` expiring ``ttl`` after ``now``."""
        issued_at = now or utcnow()
        claims: dict[str, object] = {
            "id": user_id,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        encoded: str = jwt.encode(claims, self._secret_key, algorithm=self.algorithm)
        return encoded

    def verify(self, token: str) -> str:
        """Return the user id embedded in ``token``.

        Raises:
            InvalidToken: If the token is malformed, not signed with our key,
                expired, or does not name a user.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JWTError as err:
            raise InvalidToken() from err

        user_id = payload.get("id")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken()
        return user_id
