from .alumni import AlumnusCreate, AlumnusUpdate, AlumnusResponse
from .chat import ChatbotRequest, ChatbotResponse
from .gallery import GalleryImageCreate, GalleryImageUpdate, GalleryImageResponse

__all__ = [
    "AlumnusCreate",
    "AlumnusUpdate",
    "AlumnusResponse",
    "ChatbotRequest",
    "ChatbotResponse",
    "GalleryImageCreate",
    "GalleryImageUpdate",
    "GalleryImageResponse",
]
