"""
Rate table (standard cost per destination) routes.
"""
from fastapi import APIRouter, Depends
from typing import List
from sppd.api.dependencies import get_store, http_error
from sppd.core.exceptions import SppdError
from sppd.schemas.rate_table import RateTableEntry, RateTableEntryBase
from sppd.services import master_data_service
from sppd.services.record_store import SqlAlchemyRecordStore

router = APIRouter(prefix="/rate-table", tags=["rate-table"])


@router.get("", response_model=List[RateTableEntry])
async def list_rate_entries(store: SqlAlchemyRecordStore = Depends(get_store)):
    """List the whole rate table by destination."""
    return store.list_rate_entries()


@router.get("/{destination}", response_model=RateTableEntry)
async def get_rate_entry(destination: str, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Get the rates of one destination."""
    try:
        return store.get_rate_entry(destination)
    except SppdError as e:
        raise http_error(e)


@router.put("/{destination}", response_model=RateTableEntry)
async def upsert_rate_entry(
    destination: str,
    rate_data: RateTableEntryBase,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Create or replace the whole entry for a destination."""
    return store.upsert_rate_entry(RateTableEntry(destination=destination, **rate_data.model_dump()))


@router.delete("/{destination}")
async def delete_rate_entry(destination: str, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Delete a rate table entry no assignment travels to."""
    try:
        master_data_service.delete_rate_entry(destination, store)
    except SppdError as e:
        raise http_error(e)

    return {"message": "Rate table entry deleted successfully"}
