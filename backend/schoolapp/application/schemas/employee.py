"""Pydantic DTOs for the Employee feature."""

from datetime import datetime

from pydantic import BaseModel


class EducationalUnitResponse(BaseModel):
    id: int
    name: str


class EmployeeResponse(BaseModel):
    id: int
    external_id: str
    is_active: bool
    first_name: str
    last_name: str
    username: str
    tax_id: str
    educational_units: list[EducationalUnitResponse]
    created_at: datetime
    updated_at: datetime
