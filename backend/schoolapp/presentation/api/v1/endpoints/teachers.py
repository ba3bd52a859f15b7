"""Teacher endpoints — onboarding, lookup, filtered listing."""

import logging

from fastapi import APIRouter, Body, Depends, File, Form, Query, UploadFile, status
from pydantic import ValidationError

from schoolapp.application.schemas import (
    AttachmentUpload,
    PaginatedResponse,
    TeacherCreate,
    TeacherFiltersRequest,
    TeacherResponse,
)
from schoolapp.application.services import TeacherService
from schoolapp.config import get_settings
from schoolapp.domain.entities import DEFAULT_PAGE_SIZE, SortDirection
from schoolapp.domain.exceptions import AppError, InvalidArgumentError
from schoolapp.infrastructure.dependencies import get_teacher_service
from schoolapp.presentation.api.v1.errors import invalid_payload, to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teachers", tags=["Teachers"])


async def _read_attachment(upload: UploadFile | None) -> AttachmentUpload | None:
    if upload is None:
        return None
    limit = get_settings().max_upload_size_bytes
    content = await upload.read(limit + 1)
    if len(content) > limit:
        raise InvalidArgumentError("Attachment", f"Attachment exceeds the {limit} byte limit")
    return AttachmentUpload(
        filename=upload.filename,
        content_type=upload.content_type,
        content=content,
    )


def _sort_direction(raw: str | None) -> SortDirection | None:
    """Case-insensitive ``asc`` / ``desc``; blank means the default."""
    if raw is None or not raw.strip():
        return None
    try:
        return SortDirection(raw.strip().upper())
    except ValueError:
        raise InvalidArgumentError("Sort", f"Unknown sort direction '{raw}'; allowed: ASC, DESC") from None


@router.get("", response_model=PaginatedResponse[TeacherResponse])
async def list_teachers(
    page: int = Query(0),
    size: int = Query(DEFAULT_PAGE_SIZE),
    sort_by: str | None = Query(None, description="Column to sort by, default 'id'"),
    sort_direction: str | None = Query(None, description="ASC or DESC, any case"),
    service: TeacherService = Depends(get_teacher_service),
) -> PaginatedResponse[TeacherResponse]:
    """Retrieve one page of teachers, sorted by id unless told otherwise."""
    try:
        return await service.list_teachers(page, size, sort_by, _sort_direction(sort_direction))
    except AppError as e:
        raise to_http_exception(e)


@router.post("/save", response_model=TeacherResponse)
async def save_teacher(
    teacher: str = Form(..., description="TeacherCreate payload as JSON"),
    amka_file: UploadFile | None = File(None),
    service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    """Create a teacher with its account, personal info and optional AMKA document."""
    try:
        data = TeacherCreate.model_validate_json(teacher)
    except ValidationError as e:
        raise to_http_exception(invalid_payload("Teacher", e))

    try:
        attachment = await _read_attachment(amka_file)
        return await service.save_teacher(data, attachment)
    except AppError as e:
        raise to_http_exception(e)


@router.post("/all", response_model=list[TeacherResponse])
async def get_teachers_filtered(
    filters: TeacherFiltersRequest | None = Body(None),
    service: TeacherService = Depends(get_teacher_service),
) -> list[TeacherResponse]:
    """All teachers matching the filters; an empty body matches everyone."""
    try:
        return await service.get_teachers_filtered((filters or TeacherFiltersRequest()).to_domain())
    except AppError as e:
        raise to_http_exception(e)


@router.post("/all/paginated", response_model=PaginatedResponse[TeacherResponse])
async def get_teachers_filtered_paginated(
    filters: TeacherFiltersRequest | None = Body(None),
    service: TeacherService = Depends(get_teacher_service),
) -> PaginatedResponse[TeacherResponse]:
    try:
        return await service.get_teachers_filtered_paginated(
            (filters or TeacherFiltersRequest()).to_domain()
        )
    except AppError as e:
        raise to_http_exception(e)


@router.get("/{external_id}", response_model=TeacherResponse)
async def get_teacher(
    external_id: str,
    service: TeacherService = Depends(get_teacher_service),
) -> TeacherResponse:
    try:
        return await service.get_teacher(external_id)
    except AppError as e:
        raise to_http_exception(e)


@router.delete("/{external_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(
    external_id: str,
    service: TeacherService = Depends(get_teacher_service),
) -> None:
    """Delete a teacher; its account and personal info go with it."""
    try:
        await service.delete_teacher(external_id)
    except AppError as e:
        raise to_http_exception(e)
