from .alumni_repository import AlumniRepository
from .gallery_repository import GalleryRepository
from .notifier import Notifier
from .remote_data_service import RemoteDataService

__all__ = [
    "AlumniRepository",
    "GalleryRepository",
    "Notifier",
    "RemoteDataService",
]
