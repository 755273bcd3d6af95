"""Domain error taxonomy.

Every failure the service reports to a client is a ``ServiceError``. Each
carries the HTTP status, a stable machine-readable ``code``, a human message
and, where one input is to blame, the ``field`` that caused it. The API layer
turns these into ``{"status": false, "errors": [{code, message, field?}]}``.
"""

from __future__ import annotations

from fastapi import status


class ServiceError(Exception):
    """Base class for errors that map onto an API error response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"
    message: str = "Internal Server Error"
    field: str | None = None

    def __init__(self, message: str | None = None, *, field: str | None = None) -> None:
        if message is not None:
            self.message = message
        if field is not None:
            self.field = field
        super().__init__(self.message)

    def to_detail(self) -> dict[str, str]:
        """Return the tagged error structure used in response bodies."""
        detail = {"code": self.code, "message": self.message}
        if self.field is not None:
            detail["field"] = self.field
        return detail


class InternalError(ServiceError):
    """Unexpected failure; never carries internal detail to the client."""


class ValidationFailed(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_INPUT"
    message = "The request is invalid."


# Authentication (401)


class AuthenticationError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "NOT_SIGNEDIN"
    message = "You need to sign in to proceed."


class NotSignedIn(AuthenticationError):
    pass


class InvalidToken(AuthenticationError):
    code = "INVALID_TOKEN"
    message = "Invalid access token"


class InvalidCredentials(AuthenticationError):
    code = "INVALID_CREDENTIALS"
    message = "The credentials you provided are invalid."
    field = "password"


# Authorization (403)


class AuthorizationError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "NOT_ALLOWED_ACCESS"
    message = "You are not authorized to perform this action."


class NotAllowedAccess(AuthorizationError):
    pass


# Missing resources (404)


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "RESOURCE_NOT_FOUND"
    message = "Resource not found."


class UserNotFound(NotFoundError):
    message = "User not found."
    field = "user"


class CommunityNotFound(NotFoundError):
    message = "Community not found."
    field = "community"


class RoleNotFound(NotFoundError):
    message = "Role not found."
    field = "role"


class MembershipNotFound(NotFoundError):
    message = "Member not found."


# Uniqueness violations


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    code = "RESOURCE_EXISTS"
    message = "Resource already exists."


class DuplicateEmail(ConflictError):
    message = "User with this email address already exists."
    field = "email"


class DuplicateSlug(ConflictError):
    message = "A community with this name already exists."
    field = "name"


class DuplicateName(ConflictError):
    message = "A role with this name already exists."
    field = "name"


class AlreadyMember(ConflictError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "User is already added in the community."
