from .alumni import AlumnusModel
from .gallery import GalleryImageModel

__all__ = [
    "AlumnusModel",
    "GalleryImageModel",
]
