"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter, Depends

from campus_portal.application.services import SSEManager
from campus_portal.config import get_settings
from campus_portal.infrastructure.dependencies import get_sse_manager

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(sse: SSEManager = Depends(get_sse_manager)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "notification_clients": sse.client_count,
    }
