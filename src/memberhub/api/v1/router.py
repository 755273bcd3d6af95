"""Versioned API router wiring for v1.

This module composes the version 1 API surface by including the sub-routers
that define their own endpoints. It contains no business logic and no
endpoint definitions.
"""
from __future__ import annotations

from typing import Final

from fastapi import APIRouter, status

from memberhub.schemas.common import ErrorResponse

from .endpoints import auth_router, communities_router, members_router, roles_router

# Every route may answer with the shared error envelope.
ERROR_RESPONSES: Final[dict[int | str, dict[str, object]]] = {
    code: {"model": ErrorResponse}
    for code in (
        status.HTTP_400_BAD_REQUEST,
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
        status.HTTP_409_CONFLICT,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
}

api_v1: Final[APIRouter] = APIRouter(responses=ERROR_RESPONSES)
api_v1.include_router(auth_router)
api_v1.include_router(communities_router)
api_v1.include_router(members_router)
api_v1.include_router(roles_router)

__all__ = ["ERROR_RESPONSES", "api_v1"]
