# src/memberhub/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .communities import router as communities_router
from .members import router as members_router
from .roles import router as roles_router

__all__ = [
    "auth_router",
    "communities_router",
    "members_router",
    "roles_router",
]
