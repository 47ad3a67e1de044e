from .alumni_service import AlumniService
from .chatbot_service import ChatbotService
from .gallery_service import GalleryService
from .optimistic_list_store import OptimisticListStore, Settlement
from .sse_manager import SSEManager

__all__ = [
    "AlumniService",
    "ChatbotService",
    "GalleryService",
    "OptimisticListStore",
    "Settlement",
    "SSEManager",
]
