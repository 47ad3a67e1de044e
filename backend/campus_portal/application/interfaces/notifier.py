"""Abstract notifier interface — port for user-facing toast notifications."""

from abc import ABC, abstractmethod

from campus_portal.domain.entities import NotificationKind


class Notifier(ABC):
    """Port — fire-and-forget side channel for success/error toasts.

    ``notify`` is synchronous and never awaited by callers; it must not
    influence the state of whatever emitted the notification.
    """

    @abstractmethod
    def notify(
        self,
        kind: NotificationKind,
        title: str,
        description: str | None = None,
    ) -> None:
        """Emit a notification."""
        ...
