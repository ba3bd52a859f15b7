from .account_repository import AccountRepository, PersonalInfoRepository
from .attachment_storage import AttachmentStorage
from .employee_repository import EmployeeRepository
from .teacher_repository import TeacherRepository

__all__ = [
    "AccountRepository",
    "AttachmentStorage",
    "EmployeeRepository",
    "PersonalInfoRepository",
    "TeacherRepository",
]
