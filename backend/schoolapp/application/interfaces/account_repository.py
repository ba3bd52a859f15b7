"""Abstract repository interfaces (ports) for the teacher aggregate's owned entities."""

from abc import ABC, abstractmethod

from schoolapp.domain.entities import Account, PersonalInfo


class AccountRepository(ABC):
    """Port for account lookups used by the uniqueness pre-checks."""

    @abstractmethod
    async def get_by_tax_id(self, tax_id: str) -> Account | None:
        """Return the account with this tax id (AFM), if any."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Account | None:
        """Return the account with this username, if any."""
        ...


class PersonalInfoRepository(ABC):
    """Port for personal-info lookups used by the uniqueness pre-checks."""

    @abstractmethod
    async def get_by_national_insurance_id(self, national_insurance_id: str) -> PersonalInfo | None:
        """Return the personal info with this AMKA, if any."""
        ...
