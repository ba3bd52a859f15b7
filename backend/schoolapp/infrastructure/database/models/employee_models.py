"""SQLAlchemy ORM models for employees and educational units."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table, UniqueConstraint, event
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolapp.infrastructure.database.base import Base, TimestampMixin
from schoolapp.infrastructure.database.models.teacher_models import AccountModel

employees_educational_units = Table(
    "employees_edu_units",
    Base.metadata,
    Column("employee_id", ForeignKey("employees.id", ondelete="CASCADE"), primary_key=True),
    Column("educational_unit_id", ForeignKey("educational_units.id", ondelete="CASCADE"), primary_key=True),
)


class EducationalUnitModel(Base):
    """ORM model — maps to the 'educational_units' table."""

    __tablename__ = "educational_units"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class EmployeeModel(TimestampMixin, Base):
    """ORM model — maps to the 'employees' table."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column(String(36), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    account_id: Mapped[int] = mapped_column(ForeignKey("accounts.id"), nullable=False, unique=True)

    account: Mapped[AccountModel] = relationship(
        lazy="joined", cascade="all, delete-orphan", single_parent=True
    )
    educational_units: Mapped[list[EducationalUnitModel]] = relationship(
        secondary=employees_educational_units,
        lazy="selectin",
        order_by=EducationalUnitModel.id,
    )

    __table_args__ = (
        UniqueConstraint("external_id", name="uq_employees_external_id"),
    )


@event.listens_for(EmployeeModel, "before_insert")
def _assign_external_id(_mapper, _connection, target: EmployeeModel) -> None:
    if target.external_id is None:
        target.external_id = str(uuid4())
