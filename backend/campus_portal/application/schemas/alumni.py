"""Pydantic DTOs for the Alumni directory."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

_EMAIL_PATTERN = r"^$|^[^@\s]+@[^@\s]+\.[^@\s]+$"
_PHONE_PATTERN = r"^$|^.{10,}$"
_FIRST_GRADUATION_YEAR = 1950


def _check_graduation_year(value: int | None) -> int | None:
    if value is None:
        return value
    current_year = datetime.now(timezone.utc).year
    if value < _FIRST_GRADUATION_YEAR:
        raise ValueError("Invalid graduation year")
    if value > current_year:
        raise ValueError("Graduation year cannot be in the future")
    return value


class AlumnusCreate(BaseModel):
    """Schema for adding an alumnus to the directory."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Priya Sharma"])
    graduation_year: int = Field(..., examples=[2018])
    course: str = Field(..., min_length=2, max_length=255, examples=["B.Sc. Physics"])
    current_position: str | None = None
    company: str | None = None
    email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(None, pattern=_PHONE_PATTERN)
    bio: str | None = None

    @field_validator("graduation_year")
    @classmethod
    def validate_graduation_year(cls, value: int | None) -> int | None:
        return _check_graduation_year(value)


class AlumnusUpdate(BaseModel):
    """Schema for updating an alumnus — all fields optional.

    Only fields present in the request body are applied
    (``model_dump(exclude_unset=True)``), so optional profile fields can be
    cleared by sending ``null``.
    """

    name: str | None = Field(None, min_length=2, max_length=255)
    graduation_year: int | None = None
    course: str | None = Field(None, min_length=2, max_length=255)
    current_position: str | None = None
    company: str | None = None
    email: str | None = Field(None, pattern=_EMAIL_PATTERN)
    phone: str | None = Field(None, pattern=_PHONE_PATTERN)
    bio: str | None = None

    @field_validator("graduation_year")
    @classmethod
    def validate_graduation_year(cls, value: int | None) -> int | None:
        return _check_graduation_year(value)


class AlumnusResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    graduation_year: int
    course: str
    current_position: str | None
    company: str | None
    email: str | None
    phone: str | None
    bio: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
