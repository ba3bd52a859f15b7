"""Shared count + page query used by every filtered repository."""

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.domain.entities import PageRequest, Paginated
from schoolapp.infrastructure.database.specifications import apply_criteria, apply_sort

T = TypeVar("T")


async def fetch_all(
    session: AsyncSession,
    model: type,
    criteria: list[ColumnElement[bool]],
    page_request: PageRequest,
    to_entity: Callable[[Any], T],
) -> list[T]:
    stmt = apply_sort(apply_criteria(select(model), criteria), model, page_request)
    result = await session.execute(stmt)
    return [to_entity(row) for row in result.scalars().all()]


async def fetch_page(
    session: AsyncSession,
    model: type,
    criteria: list[ColumnElement[bool]],
    page_request: PageRequest,
    to_entity: Callable[[Any], T],
) -> Paginated[T]:
    stmt = apply_sort(apply_criteria(select(model), criteria), model, page_request)

    count_stmt = apply_criteria(select(func.count()).select_from(model), criteria)
    total = await session.scalar(count_stmt) or 0

    stmt = stmt.offset(page_request.offset).limit(page_request.page_size)
    result = await session.execute(stmt)
    items = [to_entity(row) for row in result.scalars().all()]
    return Paginated.of(items, total, page_request)
