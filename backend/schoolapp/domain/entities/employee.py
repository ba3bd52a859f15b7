"""Employee role record: owns an account and belongs to educational units."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .teacher import Account


@dataclass
class EducationalUnit:
    name: str
    id: int | None = None


@dataclass
class Employee:
    account: Account
    is_active: bool = True
    educational_units: list[EducationalUnit] = field(default_factory=list)
    id: int | None = None
    external_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
