from .employee import EducationalUnitResponse, EmployeeResponse
from .filters import EmployeeFiltersRequest, PagingRequest, TeacherFiltersRequest
from .paginated import PaginatedResponse
from .teacher import (
    AccountCreate,
    AttachmentResponse,
    AttachmentUpload,
    PersonalInfoCreate,
    TeacherCreate,
    TeacherResponse,
)

__all__ = [
    "AccountCreate",
    "AttachmentResponse",
    "AttachmentUpload",
    "EducationalUnitResponse",
    "EmployeeFiltersRequest",
    "EmployeeResponse",
    "PaginatedResponse",
    "PagingRequest",
    "PersonalInfoCreate",
    "TeacherCreate",
    "TeacherFiltersRequest",
    "TeacherResponse",
]
