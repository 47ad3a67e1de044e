"""Application service (use case) for the alumni directory."""

from campus_portal.application.interfaces import AlumniRepository, Notifier
from campus_portal.application.schemas import AlumnusCreate, AlumnusUpdate
from campus_portal.domain.entities import Alumnus, NotificationKind
from campus_portal.domain.exceptions import EntityNotFoundError


class AlumniService:
    """Orchestrates alumni CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: AlumniRepository, notifier: Notifier | None = None):
        self._repository = repository
        self._notifier = notifier

    async def get_alumnus(self, alumnus_id: str) -> Alumnus:
        alumnus = await self._repository.get_by_id(alumnus_id)
        if alumnus is None:
            raise EntityNotFoundError("Alumnus", alumnus_id)
        return alumnus

    async def list_alumni(self, skip: int = 0, limit: int = 100) -> list[Alumnus]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_alumnus(self, data: AlumnusCreate) -> Alumnus:
        alumnus = await self._repository.create(Alumnus(**data.model_dump()))
        self._announce(f"Alumnus '{alumnus.name}' added")
        return alumnus

    async def update_alumnus(self, alumnus_id: str, data: AlumnusUpdate) -> Alumnus:
        alumnus = await self.get_alumnus(alumnus_id)

        # Required fields ignore an explicit null; optional ones are cleared by it
        changes = data.model_dump(exclude_unset=True)
        for required in ("name", "graduation_year", "course"):
            if changes.get(required, ...) is None:
                changes.pop(required)

        alumnus.update(**changes)
        alumnus = await self._repository.update(alumnus)
        self._announce(f"Alumnus '{alumnus.name}' updated")
        return alumnus

    async def delete_alumnus(self, alumnus_id: str) -> bool:
        alumnus = await self.get_alumnus(alumnus_id)
        deleted = await self._repository.delete(alumnus_id)
        if deleted:
            self._announce(f"Alumnus '{alumnus.name}' deleted")
        return deleted

    def _announce(self, description: str) -> None:
        if self._notifier is not None:
            self._notifier.notify(NotificationKind.SUCCESS, "Success", description)
