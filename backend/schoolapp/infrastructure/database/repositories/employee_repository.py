"""Concrete repository implementation for Employee queries backed by SQLAlchemy."""

from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.application.interfaces import EmployeeRepository
from schoolapp.domain.entities import Employee, EmployeeFilters, Paginated
from schoolapp.infrastructure.database.models import EmployeeModel
from schoolapp.infrastructure.database.specifications import employee_criteria

from .mappers import employee_to_entity
from .paging import fetch_all, fetch_page


class SQLAlchemyEmployeeRepository(EmployeeRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all(self, filters: EmployeeFilters) -> list[Employee]:
        return await fetch_all(
            self._session,
            EmployeeModel,
            employee_criteria(filters),
            filters.paging.resolve(),
            employee_to_entity,
        )

    async def find_page(self, filters: EmployeeFilters) -> Paginated[Employee]:
        return await fetch_page(
            self._session,
            EmployeeModel,
            employee_criteria(filters),
            filters.paging.resolve(),
            employee_to_entity,
        )
