"""Employee endpoints — filtered listing."""

from fastapi import APIRouter, Body, Depends

from schoolapp.application.schemas import EmployeeFiltersRequest, EmployeeResponse, PaginatedResponse
from schoolapp.application.services import EmployeeService
from schoolapp.domain.exceptions import AppError
from schoolapp.infrastructure.dependencies import get_employee_service
from schoolapp.presentation.api.v1.errors import to_http_exception

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.post("/all", response_model=list[EmployeeResponse])
async def get_employees_filtered(
    filters: EmployeeFiltersRequest | None = Body(None),
    service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeResponse]:
    try:
        return await service.get_employees_filtered((filters or EmployeeFiltersRequest()).to_domain())
    except AppError as e:
        raise to_http_exception(e)


@router.post("/all/paginated", response_model=PaginatedResponse[EmployeeResponse])
async def get_employees_filtered_paginated(
    filters: EmployeeFiltersRequest | None = Body(None),
    service: EmployeeService = Depends(get_employee_service),
) -> PaginatedResponse[EmployeeResponse]:
    try:
        return await service.get_employees_filtered_paginated(
            (filters or EmployeeFiltersRequest()).to_domain()
        )
    except AppError as e:
        raise to_http_exception(e)
