"""Teacher aggregate — pure Python business objects, no framework dependencies.

A ``Teacher`` exclusively owns one ``Account`` and one ``PersonalInfo``; the
three are created and deleted together. ``PersonalInfo`` may reference an
``Attachment`` (the scanned national-insurance document).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class AccountRole(str, Enum):
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    EMPLOYEE = "EMPLOYEE"


@dataclass
class Attachment:
    """Metadata of a stored uploaded file."""

    filename: str
    saved_name: str
    file_path: str
    content_type: str | None
    extension: str
    id: int | None = None


@dataclass
class Account:
    """Login identity; unique username and unique tax id (AFM)."""

    username: str
    password_hash: str
    tax_id: str
    first_name: str
    last_name: str
    role: AccountRole = AccountRole.TEACHER
    is_active: bool = True
    id: int | None = None


@dataclass
class PersonalInfo:
    """Government identity data; national insurance id is the AMKA."""

    national_insurance_id: str
    identity_number: str
    place_of_birth: str
    municipality_of_registration: str
    attachment: Attachment | None = None
    id: int | None = None


@dataclass
class Teacher:
    """Aggregate root. ``external_id`` is assigned on first persistence."""

    account: Account
    personal_info: PersonalInfo
    is_active: bool = True
    id: int | None = None
    external_id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
