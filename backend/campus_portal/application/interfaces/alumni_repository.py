"""Abstract repository interface (port) for Alumnus persistence."""

from abc import ABC, abstractmethod

from campus_portal.domain.entities import Alumnus


class AlumniRepository(ABC):
    """Port for alumni persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, alumnus_id: str) -> Alumnus | None:
        """Retrieve a single alumnus by UUID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Alumnus]:
        """Retrieve a paginated list, latest graduation year first."""
        ...

    @abstractmethod
    async def create(self, alumnus: Alumnus) -> Alumnus:
        """Persist a new alumnus and return it."""
        ...

    @abstractmethod
    async def update(self, alumnus: Alumnus) -> Alumnus:
        """Update an existing alumnus."""
        ...

    @abstractmethod
    async def delete(self, alumnus_id: str) -> bool:
        """Delete an alumnus. Returns True if deleted, False if not found."""
        ...
