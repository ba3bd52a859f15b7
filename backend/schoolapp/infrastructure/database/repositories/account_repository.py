"""Concrete lookups for accounts and personal info backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from schoolapp.application.interfaces import AccountRepository, PersonalInfoRepository
from schoolapp.domain.entities import Account, PersonalInfo
from schoolapp.infrastructure.database.models import AccountModel, PersonalInfoModel

from .mappers import account_to_entity, personal_info_to_entity


class SQLAlchemyAccountRepository(AccountRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_tax_id(self, tax_id: str) -> Account | None:
        model = await self._session.scalar(select(AccountModel).where(AccountModel.tax_id == tax_id))
        return account_to_entity(model) if model else None

    async def get_by_username(self, username: str) -> Account | None:
        model = await self._session.scalar(select(AccountModel).where(AccountModel.username == username))
        return account_to_entity(model) if model else None


class SQLAlchemyPersonalInfoRepository(PersonalInfoRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_national_insurance_id(self, national_insurance_id: str) -> PersonalInfo | None:
        model = await self._session.scalar(
            select(PersonalInfoModel).where(
                PersonalInfoModel.national_insurance_id == national_insurance_id
            )
        )
        return personal_info_to_entity(model) if model else None
