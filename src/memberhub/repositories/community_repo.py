"""Data access helpers for communities."""
from __future__ import annotations

import logging
import re

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from memberhub.core.errors import DuplicateSlug
from memberhub.models.community import Community, Member
from memberhub.services.pagination import Page, PageRequest
from memberhub.services.snowflake import generate_id

__all__ = ["CommunityRepository", "slugify"]

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lowercase ``name`` and collapse each run of whitespace into one hyphen."""
    return _WHITESPACE_RUN.sub("-", name.lower())


class CommunityRepository:
    """Community store: communities keyed by a unique slug."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, community_id: str) -> Community | None:
        return self.session.get(Community, community_id)

    def get_by_slug(self, slug: str) -> Community | None:
        return self.session.scalars(select(Community).where(Community.slug == slug)).first()

    def create(self, name: str, owner_id: str) -> Community:
        """Insert a community owned by ``owner_id``.

        Collisions are rejected, never resolved by suffixing the slug.

        Raises:
            DuplicateSlug: If another community already derived the same slug.
        """
        slug = slugify(name)
        if self.get_by_slug(slug) is not None:
            raise DuplicateSlug()

        community = Community(id=generate_id(), name=name, slug=slug, owner_id=owner_id)
        self.session.add(community)
        try:
            self.session.flush()
        except IntegrityError as err:
            self.session.rollback()
            logger.info("Community creation rejected by unique constraint on slug %r", slug)
            raise DuplicateSlug() from err
        return community

    def list_page(self, request: PageRequest) -> Page[Community]:
        """Return one page of communities in creation order."""
        total = self.session.scalar(select(func.count()).select_from(Community)) or 0
        communities = self.session.scalars(
            select(Community)
            .order_by(Community.created_at, Community.id)
            .offset(request.offset)
            .limit(request.page_size)
        ).all()
        return Page(
            items=list(communities),
            total=total,
            page=request.page,
            page_size=request.page_size,
        )

    def list_owned_by(self, user_id: str) -> list[Community]:
        """Return every community owned by ``user_id``."""
        return list(
            self.session.scalars(
                select(Community)
                .where(Community.owner_id == user_id)
                .order_by(Community.created_at, Community.id)
            ).all()
        )

    def list_member_of(self, user_id: str) -> list[Community]:
        """Return communities ``user_id`` owns or belongs to, each listed once."""
        memberships = select(Member.community_id).where(Member.user_id == user_id)
        return list(
            self.session.scalars(
                select(Community)
                .where(or_(Community.owner_id == user_id, Community.id.in_(memberships)))
                .order_by(Community.created_at, Community.id)
            ).all()
        )
