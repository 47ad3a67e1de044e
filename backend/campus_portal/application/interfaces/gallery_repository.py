"""Abstract repository interface (port) for GalleryImage persistence."""

from abc import ABC, abstractmethod

from campus_portal.domain.entities import GalleryImage


class GalleryRepository(ABC):
    """Port for gallery persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, image_id: str) -> GalleryImage | None:
        """Retrieve a single image by its UUID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[GalleryImage]:
        """Retrieve a paginated list of images, newest first."""
        ...

    @abstractmethod
    async def create(self, image: GalleryImage) -> GalleryImage:
        """Persist a new image and return it."""
        ...

    @abstractmethod
    async def update(self, image: GalleryImage) -> GalleryImage:
        """Update an existing image."""
        ...

    @abstractmethod
    async def delete(self, image_id: str) -> bool:
        """Delete an image. Returns True if deleted, False if not found."""
        ...
