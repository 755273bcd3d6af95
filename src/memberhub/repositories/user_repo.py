"""Data access helpers for user accounts."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from memberhub.core.errors import DuplicateEmail, InvalidCredentials, UserNotFound
from memberhub.core.security import hash_password, verify_password
from memberhub.models.user import User
from memberhub.services.snowflake import generate_id

__all__ = ["UserRepository"]

logger = logging.getLogger(__name__)


class UserRepository:
    """Identity store: persists users and checks their credentials."""

    def __init__(self, session: Session, *, bcrypt_rounds: int = 10) -> None:
        self.session = session
        self.bcrypt_rounds = bcrypt_rounds

    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by identifier."""
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under ``email``."""
        return self.session.scalars(select(User).where(User.email == email)).first()

    def require(self, user_id: str) -> User:
        """Return a user by identifier or raise ``UserNotFound``."""
        user = self.get_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def create(self, *, email: str, password: str, name: str | None = None) -> User:
        """Register a new user, hashing ``password`` before it is stored.

        Raises:
            DuplicateEmail: If ``email`` is already registered, whether caught
                by the lookup or by the unique constraint at flush time.
        """
        if self.get_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(
            id=generate_id(),
            name=name,
            email=email,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
        )
        self.session.add(user)
        try:
            self.session.flush()
        except IntegrityError as err:
            self.session.rollback()
            logger.info("Concurrent sign-up rejected by unique constraint on email")
            raise DuplicateEmail() from err
        return user

    def verify_credentials(self, email: str, password: str) -> User:
        """Return the user owning ``email`` if ``password`` matches.

        Unknown emails and wrong passwords raise the same error.
        """
        user = self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentials()
        return user
