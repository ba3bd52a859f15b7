"""Paging and sorting value types shared by every filter object."""

from dataclasses import dataclass
from enum import Enum


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_COLUMN = "id"
DEFAULT_SORT_DIRECTION = SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    """Resolved, bounded paging parameters ready for a query."""

    page: int
    page_size: int
    sort_by: str
    sort_direction: SortDirection

    @property
    def offset(self) -> int:
        return self.page * self.page_size


@dataclass(frozen=True)
class Paging:
    """Raw user-supplied paging and sorting parameters.

    Values are kept exactly as received; ``resolve()`` normalizes them.
    A page size of exactly 0 is passed through unchanged and yields an
    empty page, only negative sizes fall back to ``DEFAULT_PAGE_SIZE``.
    """

    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str | None = None
    sort_direction: SortDirection | None = None

    def resolve(self) -> PageRequest:
        return PageRequest(
            page=max(self.page, 0),
            page_size=DEFAULT_PAGE_SIZE if self.page_size < 0 else self.page_size,
            sort_by=self.sort_by if self.sort_by and self.sort_by.strip() else DEFAULT_SORT_COLUMN,
            sort_direction=self.sort_direction or DEFAULT_SORT_DIRECTION,
        )
