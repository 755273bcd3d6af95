# src/memberhub/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    communities_router,
    members_router,
    roles_router,
)
from .router import api_v1

__all__ = [
    "api_v1",
    "auth_router",
    "communities_router",
    "members_router",
    "roles_router",
]
