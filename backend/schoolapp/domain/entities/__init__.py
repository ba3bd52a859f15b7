from .employee import EducationalUnit, Employee
from .filters import EmployeeFilters, TeacherFilters
from .paginated import Paginated
from .paging import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_COLUMN,
    DEFAULT_SORT_DIRECTION,
    PageRequest,
    Paging,
    SortDirection,
)
from .teacher import Account, AccountRole, Attachment, PersonalInfo, Teacher

__all__ = [
    "Account",
    "AccountRole",
    "Attachment",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_COLUMN",
    "DEFAULT_SORT_DIRECTION",
    "EducationalUnit",
    "Employee",
    "EmployeeFilters",
    "PageRequest",
    "Paginated",
    "Paging",
    "PersonalInfo",
    "SortDirection",
    "Teacher",
    "TeacherFilters",
]
