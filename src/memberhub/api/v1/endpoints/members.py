# src/memberhub/api/v1/endpoints/members.py
"""Membership endpoints: adding and removing community members."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from memberhub.api.v1.dependencies import CurrentUserIdDep, GateDep, MemberRepoDep, SessionDep
from memberhub.core.errors import MembershipNotFound
from memberhub.schemas.common import DataContent, Envelope, StatusResponse
from memberhub.schemas.member import MemberCreate, MemberResponse

router = APIRouter(prefix="/member", tags=["members"])
logger = logging.getLogger(__name__)


@router.post("", response_model=Envelope[MemberResponse])
def add_member(
    payload: MemberCreate,
    actor_id: CurrentUserIdDep,
    gate: GateDep,
    members: MemberRepoDep,
    db: SessionDep,
) -> Envelope[MemberResponse]:
    """Add a user to a community with a role; only the community owner may do this."""
    gate.require_owner(actor_id, payload.community)
    member = members.add(payload.community, payload.user, payload.role)
    db.commit()
    logger.info(
        "User %s added %s to community %s as member %s",
        actor_id,
        payload.user,
        payload.community,
        member.id,
    )
    return Envelope[MemberResponse](
        content=DataContent[MemberResponse](data=MemberResponse.from_model(member))
    )


@router.delete("/{member_id}", response_model=StatusResponse)
def remove_member(
    member_id: str,
    actor_id: CurrentUserIdDep,
    gate: GateDep,
    members: MemberRepoDep,
    db: SessionDep,
) -> StatusResponse:
    """Remove a membership; requires a community admin or moderator role."""
    member = members.get_by_id(member_id)
    if member is None:
        raise MembershipNotFound()
    gate.require_member_removal(actor_id, member)
    members.remove(member_id)
    db.commit()
    logger.info("User %s removed member %s", actor_id, member_id)
    return StatusResponse()
