# src/memberhub/api/v1/endpoints/roles.py
"""Role endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from memberhub.api.v1.dependencies import PageRequestDep, RoleRepoDep, SessionDep
from memberhub.schemas.common import DataContent, Envelope, ListContent, ListEnvelope, PageMeta
from memberhub.schemas.role import RoleCreate, RoleResponse

router = APIRouter(prefix="/role", tags=["roles"])
logger = logging.getLogger(__name__)


@router.post("", response_model=Envelope[RoleResponse])
def create_role(
    payload: RoleCreate,
    roles: RoleRepoDep,
    db: SessionDep,
) -> Envelope[RoleResponse]:
    """Create a named role."""
    role = roles.create(payload.name)
    db.commit()
    logger.info("Created role %s (%s)", role.id, role.name)
    return Envelope[RoleResponse](
        content=DataContent[RoleResponse](data=RoleResponse.model_validate(role))
    )


@router.get("", response_model=ListEnvelope[RoleResponse])
def list_roles(
    roles: RoleRepoDep,
    page_request: PageRequestDep,
) -> ListEnvelope[RoleResponse]:
    """List roles, ten per page, oldest first."""
    page = roles.list_page(page_request)
    return ListEnvelope[RoleResponse](
        content=ListContent[RoleResponse](
            data=[RoleResponse.model_validate(r) for r in page.items],
            meta=PageMeta.from_page(page),
        )
    )
