"""UMKM CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import UmkmCreate, UmkmResponse, UmkmUpdate
from app.application.services import UmkmService
from app.domain.entities import BusinessCategory, BusinessStatus, UmkmFilter, User
from app.domain.exceptions import InvalidIdentifierError
from app.infrastructure.dependencies import get_current_user, get_umkm_service

router = APIRouter(prefix="/umkm", tags=["UMKM"])


def _not_found(record_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"UMKM with id '{record_id}' not found",
    )


@router.get("", response_model=list[UmkmResponse])
async def list_umkm(
    search: str = Query("", description="Match name, owner, category or phone"),
    category: BusinessCategory | None = Query(None, description="Filter by category"),
    status_: BusinessStatus | None = Query(None, alias="status", description="Filter by status"),
    user: User = Depends(get_current_user),
    service: UmkmService = Depends(get_umkm_service),
) -> list[UmkmResponse]:
    """List the UMKM visible to the current user (own records, or the whole RW for admins)."""
    filters = UmkmFilter(
        search=search,
        category=category.value if category else None,
        status=status_.value if status_ else None,
    )
    records = await service.list_visible(user, filters)
    return [UmkmResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/{record_id}", response_model=UmkmResponse)
async def get_umkm(
    record_id: str,
    user: User = Depends(get_current_user),
    service: UmkmService = Depends(get_umkm_service),
) -> UmkmResponse:
    """Retrieve a single UMKM by ID."""
    record = await service.get(record_id)
    if record is None:
        raise _not_found(record_id)
    return UmkmResponse.model_validate(record, from_attributes=True)


@router.post("", response_model=UmkmResponse, status_code=status.HTTP_201_CREATED)
async def create_umkm(
    data: UmkmCreate,
    user: User = Depends(get_current_user),
    service: UmkmService = Depends(get_umkm_service),
) -> UmkmResponse:
    """Register a new UMKM owned by the current user."""
    try:
        record = await service.create(user, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return UmkmResponse.model_validate(record, from_attributes=True)


@router.put("/{record_id}", response_model=UmkmResponse)
async def update_umkm(
    record_id: str,
    data: UmkmUpdate,
    user: User = Depends(get_current_user),
    service: UmkmService = Depends(get_umkm_service),
) -> UmkmResponse:
    """Update the supplied fields of an existing UMKM."""
    try:
        record = await service.update(record_id, data)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if record is None:
        raise _not_found(record_id)
    return UmkmResponse.model_validate(record, from_attributes=True)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_umkm(
    record_id: str,
    user: User = Depends(get_current_user),
    service: UmkmService = Depends(get_umkm_service),
) -> None:
    """Delete a UMKM by ID."""
    if not await service.delete(record_id):
        raise _not_found(record_id)
