# src/memberhub/models/user.py
"""SQLAlchemy model for registered user accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from memberhub.db.session import Base
from memberhub.db.time import utcnow


class User(Base):
    """A person who can sign in, own communities and hold memberships."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    # Salted bcrypt hash; the raw password is never stored.
    password_hash: Mapped[str] = mapped_column("password", Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id!r})>"
