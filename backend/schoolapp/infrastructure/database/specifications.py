"""Filter → SQLAlchemy predicate translation.

Each ``*_criteria`` function returns one predicate per filter field that is
set. Unset fields (``None`` or blank strings) contribute nothing, so an empty
filter produces an empty list and the query stays unconstrained.

Matching policy:
    external_id            case-insensitive substring; % and _ match literally
    tax_id                 equality on the owned account
    national_insurance_id  equality on the owned personal info
    is_active              equality on the role record
    educational_unit_id    membership in the employee's units
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, asc, desc, func

from schoolapp.domain.entities import EmployeeFilters, PageRequest, SortDirection, TeacherFilters
from schoolapp.domain.exceptions import InvalidArgumentError
from schoolapp.infrastructure.database.models import (
    AccountModel,
    EducationalUnitModel,
    EmployeeModel,
    PersonalInfoModel,
    TeacherModel,
)

SORTABLE_COLUMNS = ("id", "external_id", "is_active", "created_at", "updated_at")


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def string_field_like(column: Any, value: str | None) -> ColumnElement[bool] | None:
    if not _present(value):
        return None
    return func.upper(column).contains(value.strip().upper(), autoescape=True)


def account_tax_id_is(relationship: Any, tax_id: str | None) -> ColumnElement[bool] | None:
    if not _present(tax_id):
        return None
    return relationship.has(AccountModel.tax_id == tax_id)


def personal_info_amka_is(amka: str | None) -> ColumnElement[bool] | None:
    if not _present(amka):
        return None
    return TeacherModel.personal_info.has(PersonalInfoModel.national_insurance_id == amka)


def is_active(column: Any, active: bool | None) -> ColumnElement[bool] | None:
    if active is None:
        return None
    return column == active


def _compact(*clauses: ColumnElement[bool] | None) -> list[ColumnElement[bool]]:
    return [c for c in clauses if c is not None]


def teacher_criteria(filters: TeacherFilters) -> list[ColumnElement[bool]]:
    return _compact(
        string_field_like(TeacherModel.external_id, filters.external_id),
        account_tax_id_is(TeacherModel.account, filters.tax_id),
        personal_info_amka_is(filters.national_insurance_id),
        is_active(TeacherModel.is_active, filters.is_active),
    )


def employee_criteria(filters: EmployeeFilters) -> list[ColumnElement[bool]]:
    unit = None
    if filters.educational_unit_id is not None:
        unit = EmployeeModel.educational_units.any(EducationalUnitModel.id == filters.educational_unit_id)
    return _compact(
        string_field_like(EmployeeModel.external_id, filters.external_id),
        account_tax_id_is(EmployeeModel.account, filters.tax_id),
        is_active(EmployeeModel.is_active, filters.is_active),
        unit,
    )


def apply_criteria(stmt: Select, criteria: list[ColumnElement[bool]]) -> Select:
    """AND every predicate into ``stmt``; no predicates leaves it untouched."""
    if criteria:
        stmt = stmt.where(*criteria)
    return stmt


def apply_sort(stmt: Select, model: type, page_request: PageRequest) -> Select:
    """Order by the requested column, ties broken by ``id`` ascending."""
    if page_request.sort_by not in SORTABLE_COLUMNS:
        raise InvalidArgumentError(
            "Sort",
            f"Cannot sort by '{page_request.sort_by}'; allowed: {', '.join(SORTABLE_COLUMNS)}",
        )
    column = getattr(model, page_request.sort_by)
    direction = desc if page_request.sort_direction == SortDirection.DESC else asc
    stmt = stmt.order_by(direction(column))
    if page_request.sort_by != "id":
        stmt = stmt.order_by(asc(model.id))
    return stmt
