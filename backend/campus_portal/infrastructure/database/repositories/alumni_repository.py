"""Concrete repository implementation for Alumnus backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_portal.application.interfaces import AlumniRepository
from campus_portal.domain.entities import Alumnus
from campus_portal.infrastructure.database.models import AlumnusModel

_PROFILE_FIELDS = (
    "name",
    "graduation_year",
    "course",
    "current_position",
    "company",
    "email",
    "phone",
    "bio",
)


class SQLAlchemyAlumniRepository(AlumniRepository):
    """Implements the AlumniRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AlumnusModel) -> Alumnus:
        """Map ORM model → domain entity."""
        return Alumnus(
            id=model.id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            **{name: getattr(model, name) for name in _PROFILE_FIELDS},
        )

    def _to_model(self, entity: Alumnus) -> AlumnusModel:
        """Map domain entity → ORM model (for creation)."""
        return AlumnusModel(
            id=entity.id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            **{name: getattr(entity, name) for name in _PROFILE_FIELDS},
        )

    async def get_by_id(self, alumnus_id: str) -> Alumnus | None:
        result = await self._session.get(AlumnusModel, alumnus_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Alumnus]:
        stmt = (
            select(AlumnusModel)
            .order_by(AlumnusModel.graduation_year.desc(), AlumnusModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, alumnus: Alumnus) -> Alumnus:
        model = self._to_model(alumnus)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, alumnus: Alumnus) -> Alumnus:
        model = await self._session.get(AlumnusModel, alumnus.id)
        if model is None:
            raise ValueError(f"Alumnus {alumnus.id} not found in database")
        for name in _PROFILE_FIELDS:
            setattr(model, name, getattr(alumnus, name))
        model.updated_at = alumnus.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, alumnus_id: str) -> bool:
        model = await self._session.get(AlumnusModel, alumnus_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
