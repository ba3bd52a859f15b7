"""Sparse filter objects; a ``None`` field imposes no constraint."""

from dataclasses import dataclass, field

from .paging import Paging


@dataclass(frozen=True)
class TeacherFilters:
    external_id: str | None = None
    tax_id: str | None = None
    national_insurance_id: str | None = None
    is_active: bool | None = None
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True)
class EmployeeFilters:
    external_id: str | None = None
    tax_id: str | None = None
    is_active: bool | None = None
    educational_unit_id: int | None = None
    paging: Paging = field(default_factory=Paging)
