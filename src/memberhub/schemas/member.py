"""Membership-related Pydantic schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from memberhub.models.community import Member
from memberhub.repositories.member_repo import MemberListing

from .role import RoleSummary
from .user import UserSummary


class MemberCreate(BaseModel):
    """Schema for adding a user to a community with a role."""

    community: str = Field(..., min_length=1, description="Community id")
    user: str = Field(..., min_length=1, description="User id")
    role: str = Field(..., min_length=1, description="Role id")


class MemberResponse(BaseModel):
    """Newly created membership, with references as ids."""

    id: str
    community: str
    user: str
    role: str
    created_at: datetime

    @classmethod
    def from_model(cls, member: Member) -> MemberResponse:
        return cls(
            id=member.id,
            community=member.community_id,
            user=member.user_id,
            role=member.role_id,
            created_at=member.created_at,
        )


class MemberDetail(BaseModel):
    """Membership in a community listing, with user and role resolved."""

    id: str
    community: str
    user: UserSummary | None
    role: RoleSummary | None
    created_at: datetime

    @classmethod
    def from_listing(cls, listing: MemberListing) -> MemberDetail:
        member = listing.member
        return cls(
            id=member.id,
            community=member.community_id,
            user=UserSummary.model_validate(listing.user) if listing.user else None,
            role=RoleSummary.model_validate(listing.role) if listing.role else None,
            created_at=member.created_at,
        )
