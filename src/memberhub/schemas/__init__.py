"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import (
    DataContent,
    Envelope,
    ErrorDetail,
    ErrorResponse,
    ListContent,
    ListEnvelope,
    PageMeta,
    StatusResponse,
)
from .community import CommunityCreate, CommunityListItem, CommunityResponse
from .member import MemberCreate, MemberDetail, MemberResponse
from .role import RoleCreate, RoleResponse, RoleSummary
from .user import (
    AuthContent,
    AuthResponse,
    SignInRequest,
    SignUpRequest,
    TokenMeta,
    UserResponse,
    UserSummary,
)

__all__ = [
    "DataContent", "Envelope", "ErrorDetail", "ErrorResponse",
    "ListContent", "ListEnvelope", "PageMeta", "StatusResponse",
    "CommunityCreate", "CommunityListItem", "CommunityResponse",
    "MemberCreate", "MemberDetail", "MemberResponse",
    "RoleCreate", "RoleResponse", "RoleSummary",
    "AuthContent", "AuthResponse", "SignInRequest", "SignUpRequest",
    "TokenMeta", "UserResponse", "UserSummary",
]
