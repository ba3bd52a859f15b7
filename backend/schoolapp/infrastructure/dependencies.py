"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.application.interfaces import AttachmentStorage
from schoolapp.application.services import EmployeeService, TeacherService
from schoolapp.config import get_settings
from schoolapp.infrastructure.database.session import get_db_session
from schoolapp.infrastructure.database.repositories import (
    SQLAlchemyAccountRepository,
    SQLAlchemyEmployeeRepository,
    SQLAlchemyPersonalInfoRepository,
    SQLAlchemyTeacherRepository,
)
from schoolapp.infrastructure.storage.local_file_storage import LocalFileStorage


def get_attachment_storage() -> AttachmentStorage:
    """Provides the attachment sink rooted at the configured upload directory."""
    return LocalFileStorage(upload_dir=get_settings().upload_dir)


async def get_teacher_service(
    session: AsyncSession = Depends(get_db_session),
    storage: AttachmentStorage = Depends(get_attachment_storage),
) -> AsyncGenerator[TeacherService, None]:
    """Provides a TeacherService whose repositories share the request session."""
    yield TeacherService(
        teacher_repository=SQLAlchemyTeacherRepository(session),
        account_repository=SQLAlchemyAccountRepository(session),
        personal_info_repository=SQLAlchemyPersonalInfoRepository(session),
        attachment_storage=storage,
    )


async def get_employee_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[EmployeeService, None]:
    """Provides an EmployeeService instance with its repository wired up."""
    yield EmployeeService(SQLAlchemyEmployeeRepository(session))
