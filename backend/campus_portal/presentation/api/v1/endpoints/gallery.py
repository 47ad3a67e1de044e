"""Gallery CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from campus_portal.application.schemas import (
    GalleryImageCreate,
    GalleryImageResponse,
    GalleryImageUpdate,
)
from campus_portal.application.services import GalleryService
from campus_portal.domain.exceptions import EntityNotFoundError
from campus_portal.infrastructure.dependencies import get_gallery_service

router = APIRouter(prefix="/gallery", tags=["Gallery"])


@router.get("", response_model=list[GalleryImageResponse])
async def list_images(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: GalleryService = Depends(get_gallery_service),
) -> list[GalleryImageResponse]:
    """Retrieve gallery images, newest first."""
    images = await service.list_images(skip=skip, limit=limit)
    return [GalleryImageResponse.model_validate(i, from_attributes=True) for i in images]


@router.get("/{image_id}", response_model=GalleryImageResponse)
async def get_image(
    image_id: str,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryImageResponse:
    """Retrieve a single gallery image by ID."""
    try:
        image = await service.get_image(image_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return GalleryImageResponse.model_validate(image, from_attributes=True)


@router.post("", response_model=GalleryImageResponse, status_code=status.HTTP_201_CREATED)
async def create_image(
    data: GalleryImageCreate,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryImageResponse:
    """Add a new gallery image."""
    image = await service.create_image(data)
    return GalleryImageResponse.model_validate(image, from_attributes=True)


@router.patch("/{image_id}", response_model=GalleryImageResponse)
async def update_image(
    image_id: str,
    data: GalleryImageUpdate,
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryImageResponse:
    """Apply a partial update to a gallery image."""
    try:
        image = await service.update_image(image_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return GalleryImageResponse.model_validate(image, from_attributes=True)


@router.delete("/{image_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_image(
    image_id: str,
    service: GalleryService = Depends(get_gallery_service),
) -> None:
    """Delete a gallery image by ID."""
    try:
        await service.delete_image(image_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
