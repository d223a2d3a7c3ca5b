"""
Paging value types shared by the store, the service and the routers.

Page numbers travel through two conventions: ``PageRequest`` is 0-based
(what the store windows on), while ``PaginationInfo`` reports 1-based
pages for display.  ``PageRequest.for_blog_page`` and
``PaginationInfo.from_total`` are the only places that cross between
them.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

from blogsite.config import settings

T = TypeVar("T")


class PageRequest(BaseModel):
    """A (0-based page number, page size) window over an ordered result set."""

    page_number: int = Field(0, ge=0)
    page_size: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def for_blog_page(cls, page: int, page_size: int | None = None) -> PageRequest:
        """
        Build a request from a 1-based display *page*.

        *page_size* defaults to ``settings.POSTS_PAGE_SIZE`` and is clamped
        to ``settings.MAX_PAGE_SIZE``.
        """
        size = page_size if page_size is not None else settings.POSTS_PAGE_SIZE
        return cls(page_number=max(page, 1) - 1, page_size=min(size, settings.MAX_PAGE_SIZE))

    @property
    def offset(self) -> int:
        """SQL OFFSET for this window."""
        return self.page_number * self.page_size


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """One window of query results plus the total number of matching rows."""

    items: Sequence[T] = field(default_factory=list)
    total: int = 0


class PaginationInfo(BaseModel):
    current_page: int
    total_pages: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_total(cls, page_request: PageRequest, total: int) -> PaginationInfo:
        # An empty blog still renders as a single (empty) page.
        total_pages = max(1, math.ceil(total / page_request.page_size))
        return cls(current_page=page_request.page_number + 1, total_pages=total_pages)

    @computed_field
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @computed_field
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages
