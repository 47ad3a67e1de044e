"""Domain entity for user-facing toast notifications."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationKind(str, Enum):
    """Styling of a notification."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Notification:
    """A single toast emitted after a mutation settles."""

    kind: NotificationKind
    title: str
    description: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_payload(self) -> dict:
        """Serialise for SSE / JSON transport."""
        return {
            "kind": self.kind.value,
            "title": self.title,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }
