"""Concrete repository implementation for GalleryImage backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_portal.application.interfaces import GalleryRepository
from campus_portal.domain.entities import GalleryImage
from campus_portal.infrastructure.database.models import GalleryImageModel


class SQLAlchemyGalleryRepository(GalleryRepository):
    """Implements the GalleryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: GalleryImageModel) -> GalleryImage:
        """Map ORM model → domain entity."""
        return GalleryImage(
            id=model.id,
            title=model.title,
            description=model.description,
            image_url=model.image_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: GalleryImage) -> GalleryImageModel:
        """Map domain entity → ORM model (for creation)."""
        return GalleryImageModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            image_url=entity.image_url,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, image_id: str) -> GalleryImage | None:
        result = await self._session.get(GalleryImageModel, image_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[GalleryImage]:
        stmt = (
            select(GalleryImageModel)
            .order_by(GalleryImageModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, image: GalleryImage) -> GalleryImage:
        model = self._to_model(image)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, image: GalleryImage) -> GalleryImage:
        model = await self._session.get(GalleryImageModel, image.id)
        if model is None:
            raise ValueError(f"GalleryImage {image.id} not found in database")
        model.title = image.title
        model.description = image.description
        model.image_url = image.image_url
        model.updated_at = image.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, image_id: str) -> bool:
        model = await self._session.get(GalleryImageModel, image_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
