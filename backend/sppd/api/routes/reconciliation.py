"""
Budget reconciliation and dashboard routes.
"""
from fastapi import APIRouter, Depends
from sppd.api.dependencies import get_store
from sppd.schemas.reconciliation import DashboardResponse, ReconciliationReport
from sppd.services.budget_reconciliation_service import reconcile
from sppd.services.dashboard_service import build_dashboard
from sppd.services.record_store import SqlAlchemyRecordStore

router = APIRouter(tags=["reconciliation"])


@router.get("/reconciliation", response_model=ReconciliationReport)
async def get_reconciliation(store: SqlAlchemyRecordStore = Depends(get_store)):
    """Realized and remaining amounts per funded budget line."""
    return reconcile(store.list_budget_lines(), store.list_assignments())


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(store: SqlAlchemyRecordStore = Depends(get_store)):
    """Assignment statistics together with the reconciliation report."""
    return build_dashboard(store.list_budget_lines(), store.list_assignments())
