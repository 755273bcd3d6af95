# src/memberhub/models/role.py
"""SQLAlchemy model for named membership roles."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from memberhub.db.session import Base
from memberhub.db.time import utcnow

ADMIN_ROLE_NAME = "Community Admin"
MODERATOR_ROLE_NAME = "Community Moderator"
MEMBER_ROLE_NAME = "Community Member"


class Role(Base):
    """A role a member can hold within a community, shared across communities."""

    __tablename__ = "role"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
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
