"""ORM model ↔ domain entity mapping shared by the repositories."""

from schoolapp.domain.entities import (
    Account,
    AccountRole,
    Attachment,
    EducationalUnit,
    Employee,
    PersonalInfo,
    Teacher,
)
from schoolapp.infrastructure.database.models import (
    AccountModel,
    AttachmentModel,
    EmployeeModel,
    PersonalInfoModel,
    TeacherModel,
)


def account_to_entity(model: AccountModel) -> Account:
    return Account(
        id=model.id,
        username=model.username,
        password_hash=model.password_hash,
        tax_id=model.tax_id,
        first_name=model.first_name,
        last_name=model.last_name,
        role=AccountRole(model.role),
        is_active=model.is_active,
    )


def account_to_model(entity: Account) -> AccountModel:
    return AccountModel(
        username=entity.username,
        password_hash=entity.password_hash,
        tax_id=entity.tax_id,
        first_name=entity.first_name,
        last_name=entity.last_name,
        role=entity.role.value,
        is_active=entity.is_active,
    )


def attachment_to_entity(model: AttachmentModel | None) -> Attachment | None:
    if model is None:
        return None
    return Attachment(
        id=model.id,
        filename=model.filename,
        saved_name=model.saved_name,
        file_path=model.file_path,
        content_type=model.content_type,
        extension=model.extension,
    )


def personal_info_to_entity(model: PersonalInfoModel) -> PersonalInfo:
    return PersonalInfo(
        id=model.id,
        national_insurance_id=model.national_insurance_id,
        identity_number=model.identity_number,
        place_of_birth=model.place_of_birth,
        municipality_of_registration=model.municipality_of_registration,
        attachment=attachment_to_entity(model.attachment),
    )


def teacher_to_entity(model: TeacherModel) -> Teacher:
    return Teacher(
        id=model.id,
        external_id=model.external_id,
        is_active=model.is_active,
        account=account_to_entity(model.account),
        personal_info=personal_info_to_entity(model.personal_info),
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def teacher_to_model(entity: Teacher) -> TeacherModel:
    """Build the full ORM graph for a new aggregate (for creation)."""
    info = entity.personal_info
    attachment = None
    if info.attachment is not None:
        attachment = AttachmentModel(
            filename=info.attachment.filename,
            saved_name=info.attachment.saved_name,
            file_path=info.attachment.file_path,
            content_type=info.attachment.content_type,
            extension=info.attachment.extension,
        )
    return TeacherModel(
        external_id=entity.external_id,
        is_active=entity.is_active,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
        account=account_to_model(entity.account),
        personal_info=PersonalInfoModel(
            national_insurance_id=info.national_insurance_id,
            identity_number=info.identity_number,
            place_of_birth=info.place_of_birth,
            municipality_of_registration=info.municipality_of_registration,
            attachment=attachment,
        ),
    )


def employee_to_entity(model: EmployeeModel) -> Employee:
    return Employee(
        id=model.id,
        external_id=model.external_id,
        is_active=model.is_active,
        account=account_to_entity(model.account),
        educational_units=[EducationalUnit(id=u.id, name=u.name) for u in model.educational_units],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
