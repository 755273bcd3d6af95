"""Community-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from memberhub.models.community import Community

from .user import UserSummary


class CommunityCreate(BaseModel):
    """Schema for creating a new community; the slug is derived from the name."""

    name: str = Field(..., min_length=2, max_length=128)


class CommunityResponse(BaseModel):
    """Community as returned to its owner, with ``owner`` as a user id."""

    id: str
    name: str
    slug: str
    owner: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, community: Community) -> CommunityResponse:
        return cls(
            id=community.id,
            name=community.name,
            slug=community.slug,
            owner=community.owner_id,
            created_at=community.created_at,
            updated_at=community.updated_at,
        )


class CommunityListItem(BaseModel):
    """Community in public listings, with the owner resolved."""

    id: str
    name: str
    slug: str
    owner: UserSummary
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, community: Community) -> CommunityListItem:
        return cls(
            id=community.id,
            name=community.name,
            slug=community.slug,
            owner=UserSummary.model_validate(community.owner),
            created_at=community.created_at,
            updated_at=community.updated_at,
        )
