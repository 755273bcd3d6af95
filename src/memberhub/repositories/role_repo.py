"""Data access helpers for roles."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from memberhub.core.errors import DuplicateName
from memberhub.models.role import Role
from memberhub.services.pagination import Page, PageRequest
from memberhub.services.snowflake import generate_id

__all__ = ["RoleRepository"]

logger = logging.getLogger(__name__)


class RoleRepository:
    """Role store: named roles with unique names."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, role_id: str) -> Role | None:
        return self.session.get(Role, role_id)

    def get_by_name(self, name: str) -> Role | None:
        return self.session.scalars(select(Role).where(Role.name == name)).first()

    def create(self, name: str) -> Role:
        """Insert a role, raising ``DuplicateName`` if the name is taken."""
        if self.get_by_name(name) is not None:
            raise DuplicateName()

        role = Role(id=generate_id(), name=name)
        self.session.add(role)
        try:
            self.session.flush()
        except IntegrityError as err:
            self.session.rollback()
            logger.info("Role creation rejected by unique constraint on name")
            raise DuplicateName() from err
        return role

    def get_or_create(self, name: str) -> tuple[Role, bool]:
        """Return the role called ``name``, creating it if needed."""
        role = self.get_by_name(name)
        if role is not None:
            return role, False
        return self.create(name), True

    def list_page(self, request: PageRequest) -> Page[Role]:
        """Return one page of roles in creation order."""
        total = self.session.scalar(select(func.count()).select_from(Role)) or 0
        roles = self.session.scalars(
            select(Role)
            .order_by(Role.created_at, Role.id)
            .offset(request.offset)
            .limit(request.page_size)
        ).all()
        return Page(items=list(roles), total=total, page=request.page, page_size=request.page_size)
