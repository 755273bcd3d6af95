"""Shared Pydantic schemas for the response envelope."""
from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from memberhub.services.pagination import Page

DataT = TypeVar("DataT")


class ErrorDetail(BaseModel):
    """One reason a request failed."""

    code: str = Field(..., description="Stable machine-readable error code")
    message: str = Field(..., description="Human readable explanation")
    field: str | None = Field(None, description="Input field at fault, when there is one")


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    status: bool = False
    errors: list[ErrorDetail]


class PageMeta(BaseModel):
    """Pagination metadata accompanying list responses."""

    total: int = Field(..., description="Number of items across all pages")
    pages: int = Field(..., description="Number of pages at the current page size")
    page: int = Field(..., description="1-indexed page returned")

    @classmethod
    def from_page(cls, page: Page) -> PageMeta:
        return cls(total=page.total, pages=page.pages, page=page.page)

    @classmethod
    def single(cls, total: int) -> PageMeta:
        """Metadata for an unpaginated listing returned as one page."""
        return cls(total=total, pages=1, page=1)


class DataContent(BaseModel, Generic[DataT]):
    data: DataT


class ListContent(BaseModel, Generic[DataT]):
    data: list[DataT]
    meta: PageMeta


class Envelope(BaseModel, Generic[DataT]):
    """Successful response carrying a single resource."""

    status: bool = True
    content: DataContent[DataT]


class ListEnvelope(BaseModel, Generic[DataT]):
    """Successful response carrying a list of resources."""

    status: bool = True
    content: ListContent[DataT]


class StatusResponse(BaseModel):
    """Successful response with no content."""

    status: bool = True
