from .alumnus import Alumnus
from .chat_reply import ChatReply
from .gallery_image import GalleryImage
from .notification import Notification, NotificationKind

__all__ = [
    "Alumnus",
    "ChatReply",
    "GalleryImage",
    "Notification",
    "NotificationKind",
]
