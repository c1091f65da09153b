"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from sppd.api.routes import (
    travelers, budget_lines, rate_table, assignments, reconciliation
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(travelers.router)
api_router.include_router(budget_lines.router)
api_router.include_router(rate_table.router)
api_router.include_router(assignments.router)
api_router.include_router(reconciliation.router)
