"""SQLAlchemy ORM models for the teacher aggregate.

``teachers`` is the aggregate root: it holds the foreign keys to its account
and personal info and cascades every lifecycle operation to them. The
attachment referenced by a personal info is *not* deleted with it.
"""

from uuid import uuid4

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolapp.infrastructure.database.base import Base, TimestampMixin


class AccountModel(TimestampMixin, Base):
    """ORM model — maps to the 'accounts' table."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    tax_id: Mapped[str] = mapped_column(String(20), nullable=False)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("username", name="uq_accounts_username"),
        UniqueConstraint("tax_id", name="uq_accounts_tax_id"),
    )

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, username='{self.username}')>"


class AttachmentModel(TimestampMixin, Base):
    """ORM model — maps to the 'attachments' table."""

    __tablename__ = "attachments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    saved_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    content_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    extension: Mapped[str] = mapped_column(String(20), nullable=False, default="")


class PersonalInfoModel(TimestampMixin, Base):
    """ORM model — maps to the 'personal_info' table."""

    __tablename__ = "personal_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    national_insurance_id: Mapped[str] = mapped_column(String(20), nullable=False)
    identity_number: Mapped[str] = mapped_column(String(50), nullable=False)
    place_of_birth: Mapped[str] = mapped_column(String(255), nullable=False)
    municipality_of_registration: Mapped[str] = mapped_column(String(255), nullable=False)
    attachment_id: Mapped[int | None] = mapped_column(
        ForeignKey("attachments.id", ondelete="SET NULL"), nullable=True
    )

    attachment: Mapped[AttachmentModel | None] = relationship(lazy="joined")

    __table_args__ = (
        UniqueConstraint("national_insurance_id", name="uq_personal_info_amka"),
        UniqueConstraint("identity_number", name="uq_personal_info_identity_number"),
    )


class TeacherModel(TimestampMixin, Base):
    """ORM model — maps to the 'teachers' table (aggregate root)."""

    __tablename__ = "teachers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(String(36), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), nullable=False, unique=True)
    personal_info_id: Mapped[int] = mapped_column(
        ForeignKey("personal_info.id"), nullable=False, unique=True
    )

    account: Mapped[AccountModel] = relationship(
        lazy="joined", cascade="all, delete-orphan", single_parent=True
    )
    personal_info: Mapped[PersonalInfoModel] = relationship(
        lazy="joined", cascade="all, delete-orphan", single_parent=True
    )

    __table_args__ = (
        UniqueConstraint("external_id", name="uq_teachers_external_id"),
    )

    def __repr__(self) -> str:
        return f"<TeacherModel(id={self.id}, external_id='{self.external_id}')>"


@event.listens_for(TeacherModel, "before_insert")
def _assign_external_id(_mapper, _connection, target: TeacherModel) -> None:
    if target.external_id is None:
        target.external_id = str(uuid4())
