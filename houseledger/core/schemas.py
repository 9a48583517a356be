"""Base pydantic schemas shared across bounded contexts."""
from __future__ import annotations

import math
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from houseledger.core.config import settings

T = TypeVar("T")


class ApiModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(ApiModel):
    """Incoming payloads reject unknown fields and trim strings."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


def reject_null(value):
    """Before-validator for optional update fields backed by NOT NULL columns.

    Omitting the field leaves the stored value alone; sending ``null`` is an error.
    """
    if value is None:
        raise ValueError("Value cannot be null")
    return value


class AuditedOut(ApiModel):
    """Audit fields exposed on every entity view."""

    id: int
    created_date: Optional[datetime] = None
    last_updated_date: Optional[datetime] = None
    is_active: bool = True
    note: Optional[str] = None


class Page(ApiModel, Generic[T]):
    """A single page of results plus paging metadata."""

    items: List[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_previous: bool
    has_next: bool

    @classmethod
    def build(cls, items: List[T], total_count: int, page: int, page_size: int) -> "Page[T]":
        total_pages = math.ceil(total_count / page_size) if page_size else 0
        return cls(
            items=items,
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_previous=page > 1,
            has_next=page < total_pages,
        )


class PageParams(BaseModel):
    """Normalized paging input: page >= 1, page_size within [1, MAX_PAGE_SIZE]."""

    page: int = Field(default=1)
    page_size: int = Field(default_factory=lambda: settings.DEFAULT_PAGE_SIZE)

    def model_post_init(self, __context) -> None:
        self.page = max(self.page, 1)
        self.page_size = min(max(self.page_size, 1), settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


__all__ = ["ApiModel", "AuditedOut", "Page", "PageParams", "RequestModel", "reject_null"]
