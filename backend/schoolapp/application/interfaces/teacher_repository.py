"""Abstract repository interface (port) for Teacher aggregate persistence."""

from abc import ABC, abstractmethod

from schoolapp.domain.entities import Paginated, Teacher, TeacherFilters


class TeacherRepository(ABC):
    """Port for teacher persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, teacher: Teacher) -> Teacher:
        """Persist the whole aggregate in one cascading write.

        Raises ``EntityAlreadyExistsError`` when a storage uniqueness
        constraint rejects the write.
        """
        ...

    @abstractmethod
    async def get_by_external_id(self, external_id: str) -> Teacher | None:
        ...

    @abstractmethod
    async def delete(self, external_id: str) -> bool:
        """Delete the aggregate. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def find_all(self, filters: TeacherFilters) -> list[Teacher]:
        """Every teacher matching the filters, ordered by the default sort."""
        ...

    @abstractmethod
    async def find_page(self, filters: TeacherFilters) -> Paginated[Teacher]:
        """One page of matching teachers using the filters' resolved paging."""
        ...
