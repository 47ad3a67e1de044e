"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from campus_portal.presentation.api.v1.endpoints.health import router as health_router
from campus_portal.presentation.api.v1.endpoints.gallery import router as gallery_router
from campus_portal.presentation.api.v1.endpoints.alumni import router as alumni_router
from campus_portal.presentation.api.v1.endpoints.chat import router as chat_router
from campus_portal.presentation.api.v1.endpoints.notifications import router as notifications_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(gallery_router)
router.include_router(alumni_router)
router.include_router(chat_router)
router.include_router(notifications_router)
