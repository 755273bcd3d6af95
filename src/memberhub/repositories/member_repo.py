"""Data access helpers for community memberships."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from memberhub.core.errors import (
    AlreadyMember,
    CommunityNotFound,
    MembershipNotFound,
    RoleNotFound,
    UserNotFound,
)
from memberhub.models.community import Community, Member
from memberhub.models.role import Role
from memberhub.models.user import User
from memberhub.services.pagination import Page, PageRequest
from memberhub.services.snowflake import generate_id

__all__ = ["MemberListing", "MemberRepository"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberListing:
    """A membership with its user and role resolved."""

    member: Member
    user: User | None
    role: Role | None


class MemberRepository:
    """Membership store: at most one membership per (community, user)."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, member_id: str) -> Member | None:
        return self.session.get(Member, member_id)

    def find(self, community_id: str, user_id: str) -> Member | None:
        """Return the membership of ``user_id`` in ``community_id``, if any."""
        return self.session.scalars(
            select(Member).where(
                Member.community_id == community_id,
                Member.user_id == user_id,
            )
        ).first()

    def add(self, community_id: str, user_id: str, role_id: str) -> Member:
        """Place ``user_id`` in ``community_id`` with ``role_id``.

        All references are checked before the single insert. The unique
        constraint on (community, user) remains the authority under races.

        Raises:
            CommunityNotFound, RoleNotFound, UserNotFound: If a reference
                does not resolve.
            AlreadyMember: If the user already belongs to the community.
        """
        if self.session.get(Community, community_id) is None:
            raise CommunityNotFound()
        if self.session.get(Role, role_id) is None:
            raise RoleNotFound()
        if self.session.get(User, user_id) is None:
            raise UserNotFound()
        if self.find(community_id, user_id) is not None:
            raise AlreadyMember()

        member = Member(
            id=generate_id(),
            community_id=community_id,
            user_id=user_id,
            role_id=role_id,
        )
        self.session.add(member)
        try:
            self.session.flush()
        except IntegrityError as err:
            self.session.rollback()
            logger.info(
                "Membership insert for community %s rejected by unique constraint",
                community_id,
            )
            raise AlreadyMember() from err
        return member

    def list_by_community(self, community_id: str, request: PageRequest) -> Page[MemberListing]:
        """Return one page of a community's members with users and roles resolved.

        Users and roles referenced by the page are each fetched in one batch
        and joined in memory.
        """
        total = (
            self.session.scalar(
                select(func.count())
                .select_from(Member)
                .where(Member.community_id == community_id)
            )
            or 0
        )
        members = self.session.scalars(
            select(Member)
            .where(Member.community_id == community_id)
            .order_by(Member.created_at, Member.id)
            .offset(request.offset)
            .limit(request.page_size)
        ).all()

        role_ids = {member.role_id for member in members}
        user_ids = {member.user_id for member in members}
        roles: dict[str, Role] = {}
        users: dict[str, User] = {}
        if role_ids:
            roles = {r.id: r for r in self.session.scalars(select(Role).where(Role.id.in_(role_ids)))}
        if user_ids:
            users = {u.id: u for u in self.session.scalars(select(User).where(User.id.in_(user_ids)))}

        listings = [
            MemberListing(member=m, user=users.get(m.user_id), role=roles.get(m.role_id))
            for m in members
        ]
        return Page(items=listings, total=total, page=request.page, page_size=request.page_size)

    def remove(self, member_id: str) -> Member:
        """Delete a membership and return the removed instance.

        Raises:
            MembershipNotFound: If no membership has ``member_id``.
        """
        member = self.get_by_id(member_id)
        if member is None:
            raise MembershipNotFound()
        self.session.delete(member)
        self.session.flush()
        return member
