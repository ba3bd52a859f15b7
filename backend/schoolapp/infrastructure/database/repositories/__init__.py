from .account_repository import SQLAlchemyAccountRepository, SQLAlchemyPersonalInfoRepository
from .employee_repository import SQLAlchemyEmployeeRepository
from .teacher_repository import SQLAlchemyTeacherRepository

__all__ = [
    "SQLAlchemyAccountRepository",
    "SQLAlchemyEmployeeRepository",
    "SQLAlchemyPersonalInfoRepository",
    "SQLAlchemyTeacherRepository",
]
