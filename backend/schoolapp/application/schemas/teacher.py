"""Pydantic DTOs (Data Transfer Objects) for the Teacher feature."""

import re
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

_PASSWORD_RULES = (
    (re.compile(r"[a-z]"), "a lowercase letter"),
    (re.compile(r"[A-Z]"), "an uppercase letter"),
    (re.compile(r"\d"), "a digit"),
    (re.compile(r"[@#$!%&*]"), "one of @#$!%&*"),
)


class AccountCreate(BaseModel):
    """Login identity of the new teacher."""

    first_name: str = Field(..., min_length=2, max_length=255, examples=["Anna"])
    last_name: str = Field(..., min_length=2, max_length=255, examples=["Georgiou"])
    username: str = Field(..., min_length=2, max_length=255, examples=["anna@school.gr"])
    password: str = Field(..., min_length=8, max_length=128)
    tax_id: str = Field(..., min_length=9, max_length=20, examples=["123456789"])

    @field_validator("password")
    @classmethod
    def _strong_password(cls, value: str) -> str:
        missing = [label for pattern, label in _PASSWORD_RULES if not pattern.search(value)]
        if missing:
            raise ValueError("password must contain " + ", ".join(missing))
        return value


class PersonalInfoCreate(BaseModel):
    national_insurance_id: str = Field(..., min_length=11, max_length=20, examples=["01018012345"])
    identity_number: str = Field(..., min_length=1, max_length=50, examples=["AK123456"])
    place_of_birth: str = Field(..., min_length=1, max_length=255)
    municipality_of_registration: str = Field(..., min_length=1, max_length=255)


class TeacherCreate(BaseModel):
    """Insert payload — creates teacher, account and personal info together."""

    is_active: bool = True
    account: AccountCreate
    personal_info: PersonalInfoCreate


class AttachmentUpload(BaseModel):
    """An uploaded file as received from the transport layer."""

    filename: str | None = None
    content_type: str | None = None
    content: bytes = b""


class AttachmentResponse(BaseModel):
    filename: str
    saved_name: str
    content_type: str | None
    extension: str


class TeacherResponse(BaseModel):
    """Read-only projection returned to the client."""

    id: int
    external_id: str
    is_active: bool
    first_name: str
    last_name: str
    username: str
    tax_id: str
    national_insurance_id: str
    attachment: AttachmentResponse | None = None
    created_at: datetime
    updated_at: datetime
