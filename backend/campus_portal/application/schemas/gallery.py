"""Pydantic DTOs (Data Transfer Objects) for the Gallery feature."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, HttpUrl

# Validated as an http(s) URL, stored as its normalized string form.
ImageUrl = Annotated[HttpUrl, AfterValidator(str)]


class GalleryImageCreate(BaseModel):
    """Schema for adding a new gallery image."""

    title: str = Field(..., min_length=2, max_length=255, examples=["Founders Day"])
    description: str | None = Field(None, examples=["Annual celebration on the main lawn"])
    image_url: ImageUrl = Field(..., examples=["https://cdn.example.edu/founders-day.jpg"])


class GalleryImageUpdate(BaseModel):
    """Schema for updating an existing gallery image — all fields optional."""

    title: str | None = Field(None, min_length=2, max_length=255)
    description: str | None = None
    image_url: ImageUrl | None = None


class GalleryImageResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    description: str | None
    image_url: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
