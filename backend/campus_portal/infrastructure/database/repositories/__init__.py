from .alumni_repository import SQLAlchemyAlumniRepository
from .gallery_repository import SQLAlchemyGalleryRepository

__all__ = [
    "SQLAlchemyAlumniRepository",
    "SQLAlchemyGalleryRepository",
]
