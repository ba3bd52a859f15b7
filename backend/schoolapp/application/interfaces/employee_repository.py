"""Abstract repository interface (port) for Employee queries."""

from abc import ABC, abstractmethod

from schoolapp.domain.entities import Employee, EmployeeFilters, Paginated


class EmployeeRepository(ABC):

    @abstractmethod
    async def find_all(self, filters: EmployeeFilters) -> list[Employee]:
        ...

    @abstractmethod
    async def find_page(self, filters: EmployeeFilters) -> Paginated[Employee]:
        ...
