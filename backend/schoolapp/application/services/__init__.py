from .employee_service import EmployeeService
from .teacher_service import TeacherService

__all__ = [
    "EmployeeService",
    "TeacherService",
]
