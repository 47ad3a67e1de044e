"""Domain entity — a graduate listed in the alumni directory."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

# Fields that may be cleared back to None through update()
_OPTIONAL_FIELDS = ("current_position", "company", "email", "phone", "bio")


@dataclass
class Alumnus:
    """Core domain entity for an alumni directory entry."""

    name: str
    graduation_year: int
    course: str
    current_position: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    bio: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        graduation_year: int | None = None,
        course: str | None = None,
        **optional: Any,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp.

        Optional profile fields are passed as keyword arguments; passing
        ``None`` clears them, omitting them leaves them untouched.
        """
        unknown = set(optional) - set(_OPTIONAL_FIELDS)
        if unknown:
            raise TypeError(f"Unknown alumnus fields: {sorted(unknown)}")

        if name is not None:
            self.name = name
        if graduation_year is not None:
            self.graduation_year = graduation_year
        if course is not None:
            self.course = course
        for key, value in optional.items():
            setattr(self, key, value)
        self.updated_at = datetime.now(timezone.utc)
