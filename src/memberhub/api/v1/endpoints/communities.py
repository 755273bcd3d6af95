# src/memberhub/api/v1/endpoints/communities.py
"""Community endpoints: creation, listings and member rosters."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from memberhub.api.v1.dependencies import (
    CommunityRepoDep,
    CurrentUserDep,
    CurrentUserIdDep,
    MemberRepoDep,
    PageRequestDep,
    SessionDep,
)
from memberhub.schemas.common import DataContent, Envelope, ListContent, ListEnvelope, PageMeta
from memberhub.schemas.community import CommunityCreate, CommunityListItem, CommunityResponse
from memberhub.schemas.member import MemberDetail

router = APIRouter(prefix="/community", tags=["communities"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=Envelope[CommunityResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_community(
    payload: CommunityCreate,
    current_user: CurrentUserDep,
    communities: CommunityRepoDep,
    db: SessionDep,
) -> Envelope[CommunityResponse]:
    """Create a community owned by the signed-in user."""
    community = communities.create(payload.name, owner_id=current_user.id)
    db.commit()
    logger.info("User %s created community %s (%s)", current_user.id, community.id, community.slug)
    return Envelope[CommunityResponse](
        content=DataContent[CommunityResponse](data=CommunityResponse.from_model(community))
    )


@router.get("", response_model=ListEnvelope[CommunityListItem])
def list_communities(
    communities: CommunityRepoDep,
    page_request: PageRequestDep,
) -> ListEnvelope[CommunityListItem]:
    """List all communities, ten per page, oldest first."""
    page = communities.list_page(page_request)
    return ListEnvelope[CommunityListItem](
        content=ListContent[CommunityListItem](
            data=[CommunityListItem.from_model(c) for c in page.items],
            meta=PageMeta.from_page(page),
        )
    )


@router.get("/me/owner", response_model=ListEnvelope[CommunityResponse])
def list_owned_communities(
    user_id: CurrentUserIdDep,
    communities: CommunityRepoDep,
) -> ListEnvelope[CommunityResponse]:
    """List the communities owned by the signed-in user."""
    owned = communities.list_owned_by(user_id)
    return ListEnvelope[CommunityResponse](
        content=ListContent[CommunityResponse](
            data=[CommunityResponse.from_model(c) for c in owned],
            meta=PageMeta.single(len(owned)),
        )
    )


@router.get("/me/member", response_model=ListEnvelope[CommunityListItem])
def list_joined_communities(
    user_id: CurrentUserIdDep,
    communities: CommunityRepoDep,
) -> ListEnvelope[CommunityListItem]:
    """List communities the signed-in user owns or belongs to."""
    joined = communities.list_member_of(user_id)
    return ListEnvelope[CommunityListItem](
        content=ListContent[CommunityListItem](
            data=[CommunityListItem.from_model(c) for c in joined],
            meta=PageMeta.single(len(joined)),
        )
    )


@router.get("/{community_id}/members", response_model=ListEnvelope[MemberDetail])
def list_community_members(
    community_id: str,
    members: MemberRepoDep,
    page_request: PageRequestDep,
) -> ListEnvelope[MemberDetail]:
    """List a community's members with their user and role resolved."""
    page = members.list_by_community(community_id, page_request)
    return ListEnvelope[MemberDetail](
        content=ListContent[MemberDetail](
            data=[MemberDetail.from_listing(listing) for listing in page.items],
            meta=PageMeta.from_page(page),
        )
    )
