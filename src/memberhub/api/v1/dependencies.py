"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from memberhub.core.errors import NotSignedIn
from memberhub.core.settings import Settings
from memberhub.core.tokens import TokenCodec
from memberhub.db.session import get_db
from memberhub.models import User
from memberhub.repositories.community_repo import CommunityRepository
from memberhub.repositories.member_repo import MemberRepository
from memberhub.repositories.role_repo import RoleRepository
from memberhub.repositories.user_repo import UserRepository
from memberhub.services.authorization import AuthorizationGate
from memberhub.services.pagination import PageRequest, normalize_page

# Missing credentials are reported by our own error envelope, not FastAPI's.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_token_codec(request: Request) -> TokenCodec:
    """Return the application's token codec."""
    return request.app.state.token_codec


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
TokenCodecDep = Annotated[TokenCodec, Depends(get_token_codec)]


def get_user_repo(db: SessionDep, settings: SettingsDep) -> UserRepository:
    return UserRepository(db, bcrypt_rounds=settings.bcrypt_rounds)


def get_community_repo(db: SessionDep) -> CommunityRepository:
    return CommunityRepository(db)


def get_role_repo(db: SessionDep) -> RoleRepository:
    return RoleRepository(db)


def get_member_repo(db: SessionDep) -> MemberRepository:
    return MemberRepository(db)


def get_authorization_gate(db: SessionDep, settings: SettingsDep) -> AuthorizationGate:
    return AuthorizationGate(db, removal_scope=settings.member_removal_scope)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repo)]
CommunityRepoDep = Annotated[CommunityRepository, Depends(get_community_repo)]
RoleRepoDep = Annotated[RoleRepository, Depends(get_role_repo)]
MemberRepoDep = Annotated[MemberRepository, Depends(get_member_repo)]
GateDep = Annotated[AuthorizationGate, Depends(get_authorization_gate)]


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    codec: TokenCodecDep,
) -> str:
    """Return the user id carried by the bearer token.

    Raises:
        NotSignedIn: If no bearer token was presented.
        InvalidToken: If the token is malformed, forged or expired.
    """
    if credentials is None:
        raise NotSignedIn()
    return codec.verify(credentials.credentials)


CurrentUserIdDep = Annotated[str, Depends(get_current_user_id)]


def get_current_user(user_id: CurrentUserIdDep, users: UserRepoDep) -> User:
    """Return the account behind the bearer token.

    Raises:
        UserNotFound: If the token names a user that does not exist.
    """
    return users.require(user_id)


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_page_request(settings: SettingsDep, page: str | None = None) -> PageRequest:
    """Parse the ``page`` query parameter; bad or non-positive values mean page 1."""
    return PageRequest(page=normalize_page(page), page_size=settings.page_size)


PageRequestDep = Annotated[PageRequest, Depends(get_page_request)]
