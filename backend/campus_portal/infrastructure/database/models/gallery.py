"""SQLAlchemy ORM model for the GalleryImage entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campus_portal.infrastructure.database.base import Base


class GalleryImageModel(Base):
    """ORM model — maps to the 'gallery' table."""

    __tablename__ = "gallery"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_gallery_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<GalleryImageModel(id={self.id}, title='{self.title}')>"
