# src/memberhub/api/v1/endpoints/auth.py
"""Authentication endpoints: sign-up, sign-in and the current account."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status

from memberhub.api.v1.dependencies import CurrentUserDep, SessionDep, TokenCodecDep, UserRepoDep
from memberhub.core.errors import InvalidCredentials
from memberhub.core.tokens import TokenCodec
from memberhub.models import User
from memberhub.schemas.common import DataContent, Envelope
from memberhub.schemas.user import (
    AuthContent,
    AuthResponse,
    SignInRequest,
    SignUpRequest,
    TokenMeta,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["authentication"])
logger = logging.getLogger(__name__)


def _auth_response(user: User, codec: TokenCodec) -> AuthResponse:
    return AuthResponse(
        content=AuthContent(
            data=UserResponse.model_validate(user),
            meta=TokenMeta(access_token=codec.issue(user.id)),
        )
    )


@router.post(
    "/signup",
    summary="Register a new account",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
def sign_up(
    payload: SignUpRequest,
    users: UserRepoDep,
    codec: TokenCodecDep,
    db: SessionDep,
) -> AuthResponse:
    """Create an account and return it with a fresh access token."""
    user = users.create(email=payload.email, password=payload.password, name=payload.name)
    db.commit()
    logger.info("Registered user %s", user.id)
    return _auth_response(user, codec)


@router.post(
    "/signin",
    summary="Authenticate with email and password",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
)
def sign_in(
    payload: SignInRequest,
    users: UserRepoDep,
    codec: TokenCodecDep,
) -> AuthResponse:
    """Exchange valid credentials for an access token."""
    try:
        user = users.verify_credentials(payload.email, payload.password)
    except InvalidCredentials:
        logger.info("Rejected sign-in attempt")
        raise
    logger.info("User %s signed in", user.id)
    return _auth_response(user, codec)


@router.get(
    "/me",
    summary="Return the signed-in account",
    response_model=Envelope[UserResponse],
)
def get_me(current_user: CurrentUserDep) -> Envelope[UserResponse]:
    """Return the account identified by the bearer token."""
    return Envelope[UserResponse](
        content=DataContent[UserResponse](data=UserResponse.model_validate(current_user))
    )
