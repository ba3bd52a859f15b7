"""Generic paginated response envelope."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from schoolapp.domain.entities import Paginated

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Schema returned for one page of results."""

    data: list[T]
    total_elements: int
    total_pages: int
    number_of_elements: int
    current_page: int
    page_size: int

    @classmethod
    def from_page(cls, page: Paginated[Any], to_item: Callable[[Any], T]) -> "PaginatedResponse[T]":
        mapped = page.map(to_item)
        return cls(
            data=list(mapped.items),
            total_elements=mapped.total_elements,
            total_pages=mapped.total_pages,
            number_of_elements=mapped.number_of_elements,
            current_page=mapped.current_page,
            page_size=mapped.page_size,
        )
