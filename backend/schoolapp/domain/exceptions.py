"""Domain-specific exceptions — framework-independent.

Every error names a *subject* (the kind of record involved) and a human
readable message. ``code`` is the subject followed by the error kind, e.g.
``AccountAlreadyExists``.
"""


class AppError(Exception):
    """Base class for all application errors."""

    kind = "Error"

    def __init__(self, subject: str, message: str):
        self.subject = subject
        self.message = message
        super().__init__(message)

    @property
    def code(self) -> str:
        return f"{self.subject}{self.kind}"

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "subject": self.subject, "message": self.message}


class EntityAlreadyExistsError(AppError):
    """Raised when a record would violate a uniqueness rule."""

    kind = "AlreadyExists"


class EntityNotFoundError(AppError):
    """Raised when a requested entity does not exist."""

    kind = "NotFound"

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_id = entity_id
        super().__init__(entity_type, f"{entity_type} with id '{entity_id}' not found")


class InvalidArgumentError(AppError):
    """Raised for malformed input: bad payloads, unknown sort columns, oversize files."""

    kind = "InvalidArgument"


class NotAuthorizedError(AppError):
    """Raised when the caller lacks the rights for an operation."""

    kind = "NotAuthorized"


class ServerError(AppError):
    """Wraps unexpected I/O or storage failures (e.g. attachment writes)."""

    kind = "ServerError"
