"""Pagination summary and the generic page container returned by list operations."""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["Page", "PaginationSummary"]

T = TypeVar("T")


class PaginationSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    per_page: int
    first_page: Literal[1] = 1
    last_page: int
    total_count: int


class Page(BaseModel, Generic[T]):
    """One page of a collection plus its position in the full collection.

    A page requested beyond `pagination.last_page` has no items but still
    reports the true bounds.
    """

    model_config = ConfigDict(frozen=True)

    items: list[T] = Field(default_factory=list)
    pagination: PaginationSummary

    @property
    def has_next(self) -> bool:
        return self.pagination.page < self.pagination.last_page
