"""Pydantic DTOs for filter / pagination request bodies."""

from pydantic import BaseModel, Field, field_validator

from schoolapp.domain.entities import (
    DEFAULT_PAGE_SIZE,
    EmployeeFilters,
    Paging,
    SortDirection,
    TeacherFilters,
)


class PagingRequest(BaseModel):
    """Raw paging fields, accepted as sent and normalized by ``Paging.resolve()``."""

    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str | None = Field(None, examples=["id"])
    sort_direction: SortDirection | None = None

    @field_validator("sort_direction", mode="before")
    @classmethod
    def _upper_direction(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value

    def to_paging(self) -> Paging:
        return Paging(
            page=self.page,
            page_size=self.page_size,
            sort_by=self.sort_by,
            sort_direction=self.sort_direction,
        )


class TeacherFiltersRequest(PagingRequest):
    """Teacher filters. Every field is optional and ``null`` means no constraint."""

    external_id: str | None = None
    tax_id: str | None = None
    national_insurance_id: str | None = None
    is_active: bool | None = None

    def to_domain(self) -> TeacherFilters:
        return TeacherFilters(
            external_id=self.external_id,
            tax_id=self.tax_id,
            national_insurance_id=self.national_insurance_id,
            is_active=self.is_active,
            paging=self.to_paging(),
        )


class EmployeeFiltersRequest(PagingRequest):
    external_id: str | None = None
    tax_id: str | None = None
    is_active: bool | None = None
    educational_unit_id: int | None = None

    def to_domain(self) -> EmployeeFilters:
        return EmployeeFilters(
            external_id=self.external_id,
            tax_id=self.tax_id,
            is_active=self.is_active,
            educational_unit_id=self.educational_unit_id,
            paging=self.to_paging(),
        )
