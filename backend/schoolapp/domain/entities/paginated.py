"""Immutable page of results with totals."""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from .paging import PageRequest

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Paginated(Generic[T]):
    """One materialized page of results.

    ``items`` keeps query order. ``total_pages`` is derived from the total
    element count and the page size; a page size of 0 always reports 0 pages.
    """

    items: tuple[T, ...]
    total_elements: int
    current_page: int
    page_size: int

    @classmethod
    def of(cls, items: Sequence[T], total_elements: int, page_request: PageRequest) -> "Paginated[T]":
        return cls(
            items=tuple(items),
            total_elements=total_elements,
            current_page=page_request.page,
            page_size=page_request.page_size,
        )

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    def map(self, fn: Callable[[T], R]) -> "Paginated[R]":
        """Return a new page with every item passed through ``fn``."""
        return Paginated(
            items=tuple(fn(item) for item in self.items),
            total_elements=self.total_elements,
            current_page=self.current_page,
            page_size=self.page_size,
        )
