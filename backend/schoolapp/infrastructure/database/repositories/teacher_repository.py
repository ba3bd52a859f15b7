"""Concrete repository implementation for the Teacher aggregate backed by SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.application.interfaces import TeacherRepository
from schoolapp.domain.entities import Paginated, Teacher, TeacherFilters
from schoolapp.infrastructure.database.integrity import translate_integrity_error
from schoolapp.infrastructure.database.models import TeacherModel
from schoolapp.infrastructure.database.specifications import teacher_criteria

from .mappers import teacher_to_entity, teacher_to_model
from .paging import fetch_all, fetch_page

logger = logging.getLogger(__name__)


class SQLAlchemyTeacherRepository(TeacherRepository):
    """Implements the TeacherRepository port using SQLAlchemy async sessions.

    ``create`` flushes but never commits; the session owner decides. A failed
    flush leaves the session needing a rollback.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, teacher: Teacher) -> Teacher:
        model = teacher_to_model(teacher)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            translated = translate_integrity_error(exc, "Teacher")
            if translated is None:
                raise
            raise translated from exc
        logger.debug("Flushed teacher id=%s external_id=%s", model.id, model.external_id)
        return teacher_to_entity(model)

    async def get_by_external_id(self, external_id: str) -> Teacher | None:
        model = await self._get_model(external_id)
        return teacher_to_entity(model) if model else None

    async def delete(self, external_id: str) -> bool:
        model = await self._get_model(external_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def find_all(self, filters: TeacherFilters) -> list[Teacher]:
        return await fetch_all(
            self._session,
            TeacherModel,
            teacher_criteria(filters),
            filters.paging.resolve(),
            teacher_to_entity,
        )

    async def find_page(self, filters: TeacherFilters) -> Paginated[Teacher]:
        return await fetch_page(
            self._session,
            TeacherModel,
            teacher_criteria(filters),
            filters.paging.resolve(),
            teacher_to_entity,
        )

    async def _get_model(self, external_id: str) -> TeacherModel | None:
        return await self._session.scalar(
            select(TeacherModel).where(TeacherModel.external_id == external_id)
        )
