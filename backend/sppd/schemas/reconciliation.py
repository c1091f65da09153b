"""
Pydantic schemas for budget reconciliation and the dashboard.
"""
from pydantic import BaseModel
from typing import List
from decimal import Decimal


class BudgetLineReconciliation(BaseModel):
    """Realized and remaining figures for one funded budget line."""
    code: str
    name: str
    budget_ceiling: Decimal
    disbursement_ceiling: Decimal  # Parsed from the free-form field
    realized: Decimal  # Sum of all assignment totals charged to this line
    remaining_disbursement: Decimal  # May be negative when over-realized
    remaining_budget: Decimal  # May be negative when over-realized
    assignment_count: int


class ReconciliationReport(BaseModel):
    """Per-line figures and their global sums."""
    lines: List[BudgetLineReconciliation] = []
    total_budget_ceiling: Decimal = Decimal(0)
    total_disbursement_ceiling: Decimal = Decimal(0)
    total_realized: Decimal = Decimal(0)
    total_remaining_disbursement: Decimal = Decimal(0)
    total_remaining_budget: Decimal = Decimal(0)


class DestinationCount(BaseModel):
    """Number of within-region assignments to one destination."""
    name: str
    count: int


class DashboardStats(BaseModel):
    """Assignment counts by travel type and destination."""
    total: int
    within_region: int
    out_of_region: int
    within_region_pct: int  # Rounded, 0-100
    out_of_region_pct: int  # Rounded, 0-100
    destinations: List[DestinationCount] = []


class DashboardResponse(BaseModel):
    """Schema for the dashboard payload."""
    stats: DashboardStats
    reconciliation: ReconciliationReport
