"""Notification stream — toasts pushed to browsers over SSE."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from campus_portal.application.services import SSEManager
from campus_portal.infrastructure.dependencies import get_sse_manager

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/stream")
async def notification_stream(
    sse: SSEManager = Depends(get_sse_manager),
) -> StreamingResponse:
    """SSE endpoint for success/error toasts.

    Clients connect via EventSource and receive 'notification' events.
    """
    return StreamingResponse(
        sse.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
