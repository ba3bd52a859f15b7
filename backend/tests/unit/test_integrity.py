"""Unit tests for unique-constraint error translation."""

from sqlalchemy.exc import IntegrityError

from schoolapp.infrastructure.database.integrity import translate_integrity_error


class UniqueViolation(Exception):
    """Stands in for asyncpg's UniqueViolationError."""

    def __init__(self, message: str, constraint_name: str):
        super().__init__(message)
        self.constraint_name = constraint_name


def _error(message: str) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, Exception(message))


def _postgres_error(message: str, constraint_name: str) -> IntegrityError:
    adapted = Exception(message)
    adapted.__cause__ = UniqueViolation(message, constraint_name)
    return IntegrityError("INSERT ...", {}, adapted)


def test_sqlite_message_maps_to_subject():
    error = translate_integrity_error(_error("UNIQUE constraint failed: accounts.tax_id"), "Teacher")
    assert error is not None
    assert error.subject == "Account"
    assert error.code == "AccountAlreadyExists"


def test_postgres_constraint_name_maps_to_subject():
    message = 'duplicate key value violates unique constraint "uq_personal_info_amka"'
    error = translate_integrity_error(_postgres_error(message, "uq_personal_info_amka"), "Teacher")
    assert error is not None
    assert error.subject == "PersonalInfo"


def test_postgres_constraint_name_wins_over_values_in_detail():
    message = (
        'duplicate key value violates unique constraint "uq_accounts_username"\n'
        "DETAIL:  Key (username)=(uq_accounts_tax_id) already exists."
    )
    error = translate_integrity_error(_postgres_error(message, "uq_accounts_username"), "Teacher")
    assert error is not None
    assert error.subject == "Account"
    assert "username" in error.message
    assert "tax id" not in error.message


def test_constraint_names_in_plain_text_are_not_trusted():
    message = "duplicate key value\nDETAIL:  Key (username)=(uq_personal_info_amka) already exists."
    error = translate_integrity_error(_error(message), "Teacher")
    assert error is not None
    assert error.subject == "Teacher"


def test_unknown_unique_violation_uses_default_subject():
    error = translate_integrity_error(_error("UNIQUE constraint failed: other.col"), "Teacher")
    assert error is not None
    assert error.subject == "Teacher"


def test_non_unique_violation_is_not_translated():
    assert translate_integrity_error(_error("NOT NULL constraint failed: accounts.role"), "Teacher") is None
