"""Exception handlers shaping every failure into the error envelope."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from memberhub.core.errors import InternalError, ServiceError, ValidationFailed
from memberhub.schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "INVALID_INPUT",
    status.HTTP_401_UNAUTHORIZED: "NOT_SIGNEDIN",
    status.HTTP_403_FORBIDDEN: "NOT_ALLOWED_ACCESS",
    status.HTTP_404_NOT_FOUND: "RESOURCE_NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def error_response(
    status_code: int,
    errors: list[dict[str, str]],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(errors=[ErrorDetail.model_validate(e) for e in errors])
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_from_loc(loc: tuple[int | str, ...]) -> str | None:
    # ("body", "email") -> "email"; ("body",) -> None
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else None


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return error_response(exc.status_code, [exc.to_detail()])


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        field = _field_from_loc(tuple(err.get("loc", ())))
        errors.append(ValidationFailed(err.get("msg"), field=field).to_detail())
    return error_response(status.HTTP_400_BAD_REQUEST, errors)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(
        exc.status_code,
        [{"code": code, "message": str(exc.detail)}],
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, [InternalError().to_detail()])


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
