"""Insert payloads to aggregates, aggregates to response DTOs."""

from werkzeug.security import generate_password_hash

from schoolapp.application.schemas import (
    AttachmentResponse,
    EducationalUnitResponse,
    EmployeeResponse,
    TeacherCreate,
    TeacherResponse,
)
from schoolapp.domain.entities import Account, AccountRole, Employee, PersonalInfo, Teacher


def to_teacher_entity(data: TeacherCreate) -> Teacher:
    """Build the in-memory aggregate; nothing is persisted here."""
    account = Account(
        username=data.account.username,
        password_hash=generate_password_hash(data.account.password),
        tax_id=data.account.tax_id,
        first_name=data.account.first_name,
        last_name=data.account.last_name,
        role=AccountRole.TEACHER,
        is_active=data.is_active,
    )
    personal_info = PersonalInfo(
        national_insurance_id=data.personal_info.national_insurance_id,
        identity_number=data.personal_info.identity_number,
        place_of_birth=data.personal_info.place_of_birth,
        municipality_of_registration=data.personal_info.municipality_of_registration,
    )
    return Teacher(account=account, personal_info=personal_info, is_active=data.is_active)


def to_teacher_response(teacher: Teacher) -> TeacherResponse:
    attachment = teacher.personal_info.attachment
    return TeacherResponse(
        id=teacher.id,
        external_id=teacher.external_id,
        is_active=teacher.is_active,
        first_name=teacher.account.first_name,
        last_name=teacher.account.last_name,
        username=teacher.account.username,
        tax_id=teacher.account.tax_id,
        national_insurance_id=teacher.personal_info.national_insurance_id,
        attachment=AttachmentResponse(
            filename=attachment.filename,
            saved_name=attachment.saved_name,
            content_type=attachment.content_type,
            extension=attachment.extension,
        ) if attachment else None,
        created_at=teacher.created_at,
        updated_at=teacher.updated_at,
    )


def to_employee_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        external_id=employee.external_id,
        is_active=employee.is_active,
        first_name=employee.account.first_name,
        last_name=employee.account.last_name,
        username=employee.account.username,
        tax_id=employee.account.tax_id,
        educational_units=[
            EducationalUnitResponse(id=unit.id, name=unit.name)
            for unit in employee.educational_units
        ],
        created_at=employee.created_at,
        updated_at=employee.updated_at,
    )
