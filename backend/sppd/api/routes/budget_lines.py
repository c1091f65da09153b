"""
Budget line (sub-activity) routes.
"""
from fastapi import APIRouter, Depends
from typing import List
from sppd.api.dependencies import get_store, http_error
from sppd.core.exceptions import SppdError
from sppd.schemas.budget_line import BudgetLine, BudgetLineUpsert
from sppd.services import master_data_service
from sppd.services.record_store import SqlAlchemyRecordStore

router = APIRouter(prefix="/budget-lines", tags=["budget-lines"])


@router.get("", response_model=List[BudgetLine])
async def list_budget_lines(store: SqlAlchemyRecordStore = Depends(get_store)):
    """List all budget lines by code."""
    return store.list_budget_lines()


@router.get("/{code}", response_model=BudgetLine)
async def get_budget_line(code: str, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Get a budget line."""
    try:
        return store.get_budget_line(code)
    except SppdError as e:
        raise http_error(e)


@router.put("/{code}", response_model=BudgetLine)
async def upsert_budget_line(
    code: str,
    budget_data: BudgetLineUpsert,
    store: SqlAlchemyRecordStore = Depends(get_store)
):
    """Create or replace the budget line with this code."""
    return store.upsert_budget_line(BudgetLine(code=code, **budget_data.model_dump()))


@router.delete("/{code}")
async def delete_budget_line(code: str, store: SqlAlchemyRecordStore = Depends(get_store)):
    """Delete a budget line no assignment is charged to."""
    try:
        master_data_service.delete_budget_line(code, store)
    except SppdError as e:
        raise http_error(e)

    return {"message": "Budget line deleted successfully"}
