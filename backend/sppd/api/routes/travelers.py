"""
Traveler (employee roster) routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List
from sppd.api.dependencies import get_store, http_error
from sppd.core.exceptions import SppdError
from sppd.schemas.traveler import Traveler, TravelerCreate, TravelerUpdate
from sppd.services import master_data_service
from sppd.services.record_store import SqlAlchemyRecordStore

router = APIRouter(prefix="/travelers", tags=["travelers"])


@router.get("", response_model=List[Traveler])
async def list_travelers(store: SqlAlchemyRecordStore = Depends(get_store)):
    """List all travelers by name."""
    return store.list_travelers()


@router.post("", response_model=Traveler, status_code=status.HTTP_201_CREATED)
async def create_traveler(
    traveler_data: TravelerCreate,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Add a traveler to the roster."""
    return store.upsert_traveler(Traveler(**traveler_data.model_dump()))


@router.get("/{traveler_id}", response_model=Traveler)
async def get_traveler(traveler_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Get a traveler."""
    try:
        return store.get_traveler(traveler_id)
    except SppdError as e:
        raise http_error(e)


@router.put("/{traveler_id}", response_model=Traveler)
async def update_traveler(
    traveler_id: int,
    traveler_data: TravelerUpdate,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Update a traveler's profile."""
    try:
        return master_data_service.update_traveler(traveler_id, traveler_data, store)
    except SppdError as e:
        raise http_error(e)


@router.delete("/{traveler_id}")
async def delete_traveler(traveler_id: int, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Delete a traveler who is on no assignment."""
    try:
        master_data_service.delete_traveler(traveler_id, store)
    except SppdError as e:
        raise http_error(e)

    return {"message": "Traveler deleted successfully"}
