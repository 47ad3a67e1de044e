"""Notifier that pushes toasts to connected browsers over Server-Sent Events."""

import logging

from campus_portal.application.interfaces import Notifier
from campus_portal.application.services.sse_manager import SSEManager
from campus_portal.domain.entities import Notification, NotificationKind

logger = logging.getLogger(__name__)

EVENT_TYPE = "notification"


class SSENotifier(Notifier):
    """Publishes each notification as a ``notification`` SSE event.

    Publishing is non-blocking; events for stalled clients are dropped by
    the SSEManager.
    """

    def __init__(self, sse_manager: SSEManager):
        self._sse = sse_manager

    def notify(
        self,
        kind: NotificationKind,
        title: str,
        description: str | None = None,
    ) -> None:
        notification = Notification(kind=kind, title=title, description=description)
        delivered = self._sse.publish(EVENT_TYPE, notification.to_payload())
        logger.debug("Notification '%s' delivered to %d client(s)", title, delivered)
