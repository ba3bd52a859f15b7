"""Application service (use case) for Teacher operations.

``save_teacher`` creates the teacher aggregate (teacher + account + personal
info + optional attachment) as one unit. The caller owns the session: the
request-scoped session commits only if the whole call succeeds and rolls
back on any exception, so a failed save leaves no rows behind.

The attachment file is written to disk *before* the aggregate is flushed and
is not removed if a later step fails.
"""

import logging
from uuid import uuid4

from schoolapp.application.interfaces import (
    AccountRepository,
    AttachmentStorage,
    PersonalInfoRepository,
    TeacherRepository,
)
from schoolapp.application.mapper import to_teacher_entity, to_teacher_response
from schoolapp.application.schemas import (
    AttachmentUpload,
    PaginatedResponse,
    TeacherCreate,
    TeacherResponse,
)
from schoolapp.domain.entities import Attachment, Paging, SortDirection, TeacherFilters
from schoolapp.domain.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ServerError,
)
from schoolapp.infrastructure.logging.colored_logger import SaveStage, StepLogger

logger = logging.getLogger(__name__)


def file_extension(filename: str | None) -> str:
    """Return the extension including the dot, or ``""`` when there is none."""
    if not filename or "." not in filename:
        return ""
    return filename[filename.rindex("."):]


class TeacherService:
    """Orchestrates teacher onboarding and queries. Depends on repository ports (DI)."""

    def __init__(
        self,
        teacher_repository: TeacherRepository,
        account_repository: AccountRepository,
        personal_info_repository: PersonalInfoRepository,
        attachment_storage: AttachmentStorage,
    ):
        self._teachers = teacher_repository
        self._accounts = account_repository
        self._personal_info = personal_info_repository
        self._storage = attachment_storage
        self._log = StepLogger("TeacherService")

    # ── Writes ───────────────────────────────────────────────────────

    async def save_teacher(
        self, data: TeacherCreate, attachment: AttachmentUpload | None = None
    ) -> TeacherResponse:
        with self._log.timed_step(SaveStage.UNIQUENESS, "Checking uniqueness", username=data.account.username):
            await self._ensure_unique(data)

        with self._log.timed_step(SaveStage.MAPPING, "Building teacher aggregate"):
            teacher = to_teacher_entity(data)

        if attachment is not None and attachment.content:
            with self._log.timed_step(SaveStage.ATTACHMENT, "Storing attachment", filename=attachment.filename):
                teacher.personal_info.attachment = await self._store_attachment(attachment)
        else:
            self._log.detail("No attachment supplied")

        with self._log.timed_step(SaveStage.PERSIST, "Saving teacher aggregate"):
            saved = await self._teachers.create(teacher)

        self._log.step_complete(SaveStage.COMPLETE, "Teacher saved", external_id=saved.external_id)
        return to_teacher_response(saved)

    async def delete_teacher(self, external_id: str) -> None:
        """Delete a teacher together with its account and personal info."""
        if not await self._teachers.delete(external_id):
            raise EntityNotFoundError("Teacher", external_id)
        logger.info("Deleted teacher %s", external_id)

    async def _ensure_unique(self, data: TeacherCreate) -> None:
        tax_id = data.account.tax_id
        if await self._accounts.get_by_tax_id(tax_id) is not None:
            raise EntityAlreadyExistsError("Account", f"Account with tax id {tax_id} already exists")

        username = data.account.username
        if await self._accounts.get_by_username(username) is not None:
            raise EntityAlreadyExistsError("Account", f"Account with username {username} already exists")

        amka = data.personal_info.national_insurance_id
        if await self._personal_info.get_by_national_insurance_id(amka) is not None:
            raise EntityAlreadyExistsError(
                "PersonalInfo", f"PersonalInfo with national insurance id {amka} already exists"
            )

    async def _store_attachment(self, upload: AttachmentUpload) -> Attachment:
        extension = file_extension(upload.filename)
        saved_name = f"{uuid4()}{extension}"
        try:
            path = await self._storage.write(saved_name, upload.content)
        except OSError as exc:
            raise ServerError("Attachment", "Attachment can not get uploaded") from exc

        self._log.detail("Attachment written", path=path, size=len(upload.content))
        return Attachment(
            filename=upload.filename or "",
            saved_name=saved_name,
            file_path=path,
            content_type=upload.content_type,
            extension=extension,
        )

    # ── Reads ────────────────────────────────────────────────────────

    async def get_teacher(self, external_id: str) -> TeacherResponse:
        teacher = await self._teachers.get_by_external_id(external_id)
        if teacher is None:
            raise EntityNotFoundError("Teacher", external_id)
        return to_teacher_response(teacher)

    async def list_teachers(
        self,
        page: int = 0,
        size: int = 10,
        sort_by: str | None = None,
        sort_direction: SortDirection | None = None,
    ) -> PaginatedResponse[TeacherResponse]:
        """Unfiltered page of teachers."""
        paging = Paging(page=page, page_size=size, sort_by=sort_by, sort_direction=sort_direction)
        return await self.get_teachers_filtered_paginated(TeacherFilters(paging=paging))

    async def get_teachers_filtered(self, filters: TeacherFilters) -> list[TeacherResponse]:
        teachers = await self._teachers.find_all(filters)
        return [to_teacher_response(t) for t in teachers]

    async def get_teachers_filtered_paginated(
        self, filters: TeacherFilters
    ) -> PaginatedResponse[TeacherResponse]:
        page = await self._teachers.find_page(filters)
        return PaginatedResponse[TeacherResponse].from_page(page, to_teacher_response)
