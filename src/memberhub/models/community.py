"""SQLAlchemy models for communities and their memberships."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from memberhub.db.session import Base
from memberhub.db.time import utcnow

from .user import User


class Community(Base):
    """A group owned by exactly one user."""

    __tablename__ = "community"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Derived from the name at creation time and never re-derived.
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    owner_id: Mapped[str] = mapped_column(
        "owner",
        String(32),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    owner: Mapped[User] = relationship("User", lazy="joined")


class Member(Base):
    """Join entity placing a user in a community with exactly one role."""

    __tablename__ = "member"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    community_id: Mapped[str] = mapped_column(
        "community",
        String(32),
        ForeignKey("community.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        "user",
        String(32),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    role_id: Mapped[str] = mapped_column(
        "role",
        String(32),
        ForeignKey("role.id", ondelete="RESTRICT"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        UniqueConstraint("community", "user", name="uq_member_community_user"),
    )
