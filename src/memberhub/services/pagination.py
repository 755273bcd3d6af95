"""Page-number pagination helpers shared by the listing endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


def normalize_page(raw: object) -> int:
    """Return a 1-indexed page number, falling back to 1 for unusable input."""
    if raw is None or isinstance(raw, bool):
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    return page if page >= 1 else 1


def page_count(total: int, page_size: int) -> int:
    """Return how many pages ``total`` items fill at ``page_size`` per page."""
    return math.ceil(total / page_size) if total else 0


@dataclass(frozen=True)
class PageRequest:
    """A validated request for one page of a listing."""

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be positive")
        if self.page < 1:
            object.__setattr__(self, "page", 1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the size of the full result set."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        return page_count(self.total, self.page_size)
