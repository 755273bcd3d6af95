"""Authorization decisions for privileged membership operations.

Two privileges exist:

* Adding a member requires owning the target community.
* Removing a member requires holding a role named ``"Community Admin"`` or
  ``"Community Moderator"``. Under the ``global`` removal scope a matching role
  held in *any* community suffices; under the ``community`` scope it must be
  held in the community the membership belongs to.
"""

from __future__ import annotations

import logging
from typing import Literal

from sqlalchemy import select
from sqlalchemy.orm import Session

from memberhub.core.errors import CommunityNotFound, NotAllowedAccess
from memberhub.models.community import Community, Member
from memberhub.models.role import ADMIN_ROLE_NAME, MODERATOR_ROLE_NAME, Role

__all__ = ["AuthorizationGate", "PRIVILEGED_ROLE_NAMES", "RemovalScope"]

logger = logging.getLogger(__name__)

PRIVILEGED_ROLE_NAMES: frozenset[str] = frozenset({ADMIN_ROLE_NAME, MODERATOR_ROLE_NAME})

RemovalScope = Literal["global", "community"]


class AuthorizationGate:
    """Decide whether an actor may perform a privileged membership action."""

    def __init__(self, session: Session, *, removal_scope: RemovalScope = "global") -> None:
        self.session = session
        self.removal_scope = removal_scope

    def is_owner(self, user_id: str, community_id: str) -> bool:
        """Return True iff ``user_id`` owns ``community_id``."""
        owner_id = self.session.scalar(
            select(Community.owner_id).where(Community.id == community_id)
        )
        return owner_id is not None and owner_id == user_id

    def is_admin_or_moderator(self, user_id: str) -> bool:
        """Return True iff ``user_id`` holds a privileged role in any community."""
        stmt = (
            select(Member.id)
            .join(Role, Role.id == Member.role_id)
            .where(Member.user_id == user_id, Role.name.in_(PRIVILEGED_ROLE_NAMES))
            .limit(1)
        )
        return self.session.scalar(stmt) is not None

    def is_admin_or_moderator_of(self, user_id: str, community_id: str) -> bool:
        """Return True iff ``user_id`` holds a privileged role in ``community_id``."""
        stmt = (
            select(Member.id)
            .join(Role, Role.id == Member.role_id)
            .where(
                Member.user_id == user_id,
                Member.community_id == community_id,
                Role.name.in_(PRIVILEGED_ROLE_NAMES),
            )
            .limit(1)
        )
        return self.session.scalar(stmt) is not None

    def require_owner(self, user_id: str, community_id: str) -> Community:
        """Return the community if ``user_id`` owns it.

        Raises:
            CommunityNotFound: If the community does not exist.
            NotAllowedAccess: If it exists but is owned by someone else.
        """
        community = self.session.get(Community, community_id)
        if community is None:
            raise CommunityNotFound()
        if community.owner_id != user_id:
            logger.warning(
                "User %s denied adding members to community %s (not owner)",
                user_id,
                community_id,
            )
            raise NotAllowedAccess()
        return community

    def can_remove_member(self, user_id: str, member: Member) -> bool:
        """Return True if ``user_id`` may remove ``member`` under the configured scope."""
        if self.removal_scope == "community":
            return self.is_admin_or_moderator_of(user_id, member.community_id)
        return self.is_admin_or_moderator(user_id)

    def require_member_removal(self, user_id: str, member: Member) -> None:
        """Raise ``NotAllowedAccess`` unless ``user_id`` may remove ``member``."""
        if not self.can_remove_member(user_id, member):
            logger.warning(
                "User %s denied removing member %s (%s scope)",
                user_id,
                member.id,
                self.removal_scope,
            )
            raise NotAllowedAccess()
