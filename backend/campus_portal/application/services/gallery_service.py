"""Application service (use case) for GalleryImage operations."""

from campus_portal.application.interfaces import GalleryRepository, Notifier
from campus_portal.application.schemas import GalleryImageCreate, GalleryImageUpdate
from campus_portal.domain.entities import GalleryImage, NotificationKind
from campus_portal.domain.exceptions import EntityNotFoundError


class GalleryService:
    """Orchestrates gallery CRUD logic. Depends on the repository port (DI).

    When a notifier is given, every successful write is announced on it
    (the API wires it to the SSE notification stream).
    """

    def __init__(self, repository: GalleryRepository, notifier: Notifier | None = None):
        self._repository = repository
        self._notifier = notifier

    async def get_image(self, image_id: str) -> GalleryImage:
        image = await self._repository.get_by_id(image_id)
        if image is None:
            raise EntityNotFoundError("GalleryImage", image_id)
        return image

    async def list_images(self, skip: int = 0, limit: int = 100) -> list[GalleryImage]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_image(self, data: GalleryImageCreate) -> GalleryImage:
        image = GalleryImage(
            title=data.title,
            image_url=data.image_url,
            description=data.description,
        )
        image = await self._repository.create(image)
        self._announce(f"Gallery image '{image.title}' added")
        return image

    async def update_image(self, image_id: str, data: GalleryImageUpdate) -> GalleryImage:
        image = await self.get_image(image_id)
        image.update(**data.model_dump(exclude_unset=True))
        image = await self._repository.update(image)
        self._announce(f"Gallery image '{image.title}' updated")
        return image

    async def delete_image(self, image_id: str) -> bool:
        image = await self.get_image(image_id)
        deleted = await self._repository.delete(image_id)
        if deleted:
            self._announce(f"Gallery image '{image.title}' deleted")
        return deleted

    def _announce(self, description: str) -> None:
        if self._notifier is not None:
            self._notifier.notify(NotificationKind.SUCCESS, "Success", description)
