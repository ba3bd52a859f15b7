"""Application service for Employee queries."""

from schoolapp.application.interfaces import EmployeeRepository
from schoolapp.application.mapper import to_employee_response
from schoolapp.application.schemas import EmployeeResponse, PaginatedResponse
from schoolapp.domain.entities import EmployeeFilters


class EmployeeService:

    def __init__(self, repository: EmployeeRepository):
        self._repository = repository

    async def get_employees_filtered(self, filters: EmployeeFilters) -> list[EmployeeResponse]:
        employees = await self._repository.find_all(filters)
        return [to_employee_response(e) for e in employees]

    async def get_employees_filtered_paginated(
        self, filters: EmployeeFilters
    ) -> PaginatedResponse[EmployeeResponse]:
        page = await self._repository.find_page(filters)
        return PaginatedResponse[EmployeeResponse].from_page(page, to_employee_response)
