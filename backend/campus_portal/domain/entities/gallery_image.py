"""Domain entity — a picture shown on the public gallery page."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class GalleryImage:
    """Core domain entity for a gallery image."""

    title: str
    image_url: str
    description: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        image_url: str | None = None,
        description: str | None = ...,  # type: ignore[assignment]
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if image_url is not None:
            self.image_url = image_url
        if description is not ...:
            self.description = description
        self.updated_at = datetime.now(timezone.utc)
