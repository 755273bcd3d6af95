"""User-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    """Schema for account registration."""

    name: str | None = Field(None, min_length=2, max_length=128, description="Optional display name")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=6, description="Plain-text password (at least 6 characters)")


class SignInRequest(BaseModel):
    """Schema for credential sign-in."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(BaseModel):
    """Public view of an account; never includes the password hash."""

    id: str
    name: str | None
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Minimal user reference embedded in other resources."""

    id: str
    name: str | None

    model_config = ConfigDict(from_attributes=True)


class TokenMeta(BaseModel):
    access_token: str = Field(..., description="Signed bearer token, valid for one hour")


class AuthContent(BaseModel):
    data: UserResponse
    meta: TokenMeta


class AuthResponse(BaseModel):
    """Response returned by sign-up and sign-in."""

    status: bool = True
    content: AuthContent
