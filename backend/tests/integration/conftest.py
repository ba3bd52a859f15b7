"""Database fixtures: a fresh file-backed SQLite schema per test."""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from schoolapp.application.services import TeacherService
from schoolapp.infrastructure.database import Base
from schoolapp.infrastructure.database import models  # noqa: F401
from schoolapp.infrastructure.database.repositories import (
    SQLAlchemyAccountRepository,
    SQLAlchemyPersonalInfoRepository,
    SQLAlchemyTeacherRepository,
)
from schoolapp.infrastructure.database.session import create_engine_for, create_session_factory
from schoolapp.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_engine_for(f"sqlite:///{tmp_path / 'school.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def service_for(upload_dir):
    """Build a TeacherService on ``session``; repositories can be swapped by keyword."""

    def _build(session, **overrides) -> TeacherService:
        deps = {
            "teacher_repository": SQLAlchemyTeacherRepository(session),
            "account_repository": SQLAlchemyAccountRepository(session),
            "personal_info_repository": SQLAlchemyPersonalInfoRepository(session),
            "attachment_storage": LocalFileStorage(upload_dir),
        }
        deps.update(overrides)
        return TeacherService(**deps)

    return _build


@pytest.fixture
def count_rows():
    async def _count(session, model) -> int:
        return await session.scalar(select(func.count()).select_from(model))

    return _count
