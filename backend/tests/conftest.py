"""Shared fixtures for unit and integration tests."""

import os

# The module-level engine is built on import; keep it off PostgreSQL.
os.environ.setdefault("DATABASE_URL", "sqlite:///./schoolapp-test.db")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from schoolapp.application.schemas import AccountCreate, PersonalInfoCreate, TeacherCreate  # noqa: E402


def build_teacher_create(
    n: int = 1,
    *,
    tax_id: str | None = None,
    username: str | None = None,
    national_insurance_id: str | None = None,
    is_active: bool = True,
) -> TeacherCreate:
    return TeacherCreate(
        is_active=is_active,
        account=AccountCreate(
            first_name="Anna",
            last_name=f"Teacher{n}",
            username=username or f"teacher{n}@school.gr",
            password="Secret#123",
            tax_id=tax_id or f"{n:09d}",
        ),
        personal_info=PersonalInfoCreate(
            national_insurance_id=national_insurance_id or f"{n:011d}",
            identity_number=f"AK{n:06d}",
            place_of_birth="Athens",
            municipality_of_registration="Athens",
        ),
    )


@pytest.fixture
def make_teacher():
    """Factory for valid TeacherCreate payloads; ``n`` keeps every unique key distinct."""
    return build_teacher_create
