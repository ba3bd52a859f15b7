from .employee_models import EducationalUnitModel, EmployeeModel, employees_educational_units
from .teacher_models import AccountModel, AttachmentModel, PersonalInfoModel, TeacherModel

__all__ = [
    "AccountModel",
    "AttachmentModel",
    "EducationalUnitModel",
    "EmployeeModel",
    "PersonalInfoModel",
    "TeacherModel",
    "employees_educational_units",
]
