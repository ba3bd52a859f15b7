"""Domain error → HTTP response translation for the v1 endpoints."""

import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from schoolapp.domain.exceptions import (
    AppError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidArgumentError,
    NotAuthorizedError,
    ServerError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[AppError], int] = {
    EntityAlreadyExistsError: status.HTTP_409_CONFLICT,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidArgumentError: status.HTTP_400_BAD_REQUEST,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    ServerError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: AppError) -> HTTPException:
    """Build the HTTPException for a domain error; ``detail`` carries code, subject, message."""
    status_code = _STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("%s: %s", error.code, error.message, exc_info=error)
    else:
        logger.warning("%s: %s", error.code, error.message)
    return HTTPException(status_code=status_code, detail=error.to_dict())


def invalid_payload(subject: str, error: ValidationError) -> InvalidArgumentError:
    """Summarize a pydantic ValidationError as an InvalidArgumentError."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or subject}: {err['msg']}"
        for err in error.errors()
    )
    return InvalidArgumentError(subject, f"Invalid {subject} payload: {problems}")
