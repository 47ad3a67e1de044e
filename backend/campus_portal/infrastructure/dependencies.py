"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_portal.config import get_settings
from campus_portal.application.interfaces import Notifier
from campus_portal.application.services import (
    AlumniService,
    ChatbotService,
    GalleryService,
    SSEManager,
)
from campus_portal.infrastructure.database.session import get_db_session
from campus_portal.infrastructure.database.repositories import (
    SQLAlchemyAlumniRepository,
    SQLAlchemyGalleryRepository,
)
from campus_portal.infrastructure.notifications import SSENotifier


@lru_cache
def get_sse_manager() -> SSEManager:
    """Process-wide SSE broadcaster shared by notifiers and stream endpoints."""
    return SSEManager()


def get_notifier(sse: SSEManager = Depends(get_sse_manager)) -> Notifier:
    """Toasts for server-side writes, pushed to /notifications/stream."""
    return SSENotifier(sse)


async def get_gallery_service(
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
) -> AsyncGenerator[GalleryService, None]:
    """Provides a GalleryService instance with its repository wired up."""
    repository = SQLAlchemyGalleryRepository(session)
    yield GalleryService(repository, notifier)


async def get_alumni_service(
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
) -> AsyncGenerator[AlumniService, None]:
    """Provides an AlumniService instance with its repository wired up."""
    repository = SQLAlchemyAlumniRepository(session)
    yield AlumniService(repository, notifier)


def get_chatbot_service() -> ChatbotService:
    """Provides the keyword chatbot configured with the default language."""
    settings = get_settings()
    return ChatbotService(default_language=settings.chatbot_default_language)
