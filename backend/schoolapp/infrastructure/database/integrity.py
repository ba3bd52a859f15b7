"""Translation of storage uniqueness violations into domain errors.

The uniqueness pre-checks in the services only produce friendlier messages;
the unique constraints declared on the tables are the real guard. When two
concurrent saves both pass the pre-checks, the loser's flush fails here and
is reported as ``EntityAlreadyExistsError`` like a failed pre-check.
"""

import logging

from sqlalchemy.exc import IntegrityError

from schoolapp.domain.exceptions import EntityAlreadyExistsError

logger = logging.getLogger(__name__)

# constraint name (PostgreSQL) and table.column (SQLite) → subject, field label
_UNIQUE_KEYS: dict[str, tuple[str, str]] = {
    "uq_accounts_tax_id": ("Account", "tax id"),
    "accounts.tax_id": ("Account", "tax id"),
    "uq_accounts_username": ("Account", "username"),
    "accounts.username": ("Account", "username"),
    "uq_personal_info_amka": ("PersonalInfo", "national insurance id"),
    "personal_info.national_insurance_id": ("PersonalInfo", "national insurance id"),
    "uq_personal_info_identity_number": ("PersonalInfo", "identity number"),
    "personal_info.identity_number": ("PersonalInfo", "identity number"),
    "uq_teachers_external_id": ("Teacher", "external id"),
    "teachers.external_id": ("Teacher", "external id"),
    "uq_employees_external_id": ("Employee", "external id"),
    "employees.external_id": ("Employee", "external id"),
}

_SQLITE_UNIQUE_PREFIX = "UNIQUE constraint failed:"


def _constraint_name(exc: IntegrityError) -> str | None:
    """Name of the violated constraint as reported by the driver, if any.

    asyncpg exposes it as ``constraint_name`` on the driver exception, which
    SQLAlchemy's adapter chains as ``__cause__`` of ``exc.orig``.
    """
    for candidate in (exc.orig, getattr(exc.orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


def _sqlite_column(message: str) -> str | None:
    """First ``table.column`` of a SQLite ``UNIQUE constraint failed`` message."""
    if _SQLITE_UNIQUE_PREFIX not in message:
        return None
    columns = message.split(_SQLITE_UNIQUE_PREFIX, 1)[1]
    return columns.split(",")[0].strip() or None


def translate_integrity_error(exc: IntegrityError, default_subject: str) -> EntityAlreadyExistsError | None:
    """Map a unique-constraint violation to ``EntityAlreadyExistsError``.

    Returns ``None`` for integrity errors that are not uniqueness violations
    (e.g. NOT NULL or foreign key failures) so the caller can re-raise them.
    """
    message = str(exc.orig) if exc.orig is not None else str(exc)
    key = _constraint_name(exc) or _sqlite_column(message)
    if key in _UNIQUE_KEYS:
        subject, label = _UNIQUE_KEYS[key]
        logger.info("Unique constraint %s rejected write", key)
        return EntityAlreadyExistsError(subject, f"{subject} with this {label} already exists")

    lowered = message.lower()
    if "unique" in lowered or "duplicate" in lowered:
        logger.warning("Unmapped uniqueness violation: %s", message)
        return EntityAlreadyExistsError(
            default_subject, f"{default_subject} violates a uniqueness constraint"
        )
    return None
