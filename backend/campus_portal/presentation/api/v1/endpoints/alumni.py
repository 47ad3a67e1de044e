"""Alumni directory CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from campus_portal.application.schemas import AlumnusCreate, AlumnusResponse, AlumnusUpdate
from campus_portal.application.services import AlumniService
from campus_portal.domain.exceptions import EntityNotFoundError
from campus_portal.infrastructure.dependencies import get_alumni_service

router = APIRouter(prefix="/alumni", tags=["Alumni"])


@router.get("", response_model=list[AlumnusResponse])
async def list_alumni(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: AlumniService = Depends(get_alumni_service),
) -> list[AlumnusResponse]:
    """Retrieve alumni, most recent graduation year first."""
    alumni = await service.list_alumni(skip=skip, limit=limit)
    return [AlumnusResponse.model_validate(a, from_attributes=True) for a in alumni]


@router.get("/{alumnus_id}", response_model=AlumnusResponse)
async def get_alumnus(
    alumnus_id: str,
    service: AlumniService = Depends(get_alumni_service),
) -> AlumnusResponse:
    try:
        alumnus = await service.get_alumnus(alumnus_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AlumnusResponse.model_validate(alumnus, from_attributes=True)


@router.post("", response_model=AlumnusResponse, status_code=status.HTTP_201_CREATED)
async def create_alumnus(
    data: AlumnusCreate,
    service: AlumniService = Depends(get_alumni_service),
) -> AlumnusResponse:
    alumnus = await service.create_alumnus(data)
    return AlumnusResponse.model_validate(alumnus, from_attributes=True)


@router.patch("/{alumnus_id}", response_model=AlumnusResponse)
async def update_alumnus(
    alumnus_id: str,
    data: AlumnusUpdate,
    service: AlumniService = Depends(get_alumni_service),
) -> AlumnusResponse:
    try:
        alumnus = await service.update_alumnus(alumnus_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AlumnusResponse.model_validate(alumnus, from_attributes=True)


@router.delete("/{alumnus_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_alumnus(
    alumnus_id: str,
    service: AlumniService = Depends(get_alumni_service),
) -> None:
    try:
        await service.delete_alumnus(alumnus_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
