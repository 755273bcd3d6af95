# src/memberhub/models/__init__.py
"""SQLAlchemy models for the memberhub application."""

from .community import Community, Member
from .role import Role
from .user import User

__all__ = [
    "Community", "Member",
    "Role",
    "User",
]
