"""
Dashboard figures: assignment counts and budget reconciliation.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence
from sppd.data.regions import NTB_DESTINATIONS
from sppd.models.assignment import TravelType
from sppd.schemas.assignment import Assignment
from sppd.schemas.budget_line import BudgetLine
from sppd.schemas.reconciliation import DashboardResponse, DashboardStats, DestinationCount
from sppd.services.budget_reconciliation_service import reconcile


def _percentage(part: int, total: int) -> int:
    """Whole percentage, halves rounded up."""
    if not total:
        return 0
    return int((Decimal(part * 100) / total).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def dashboard_stats(assignments: Sequence[Assignment]) -> DashboardStats:
    """Counts by travel type, and within-region counts per destination (busiest first)."""
    total = len(assignments)
    within = [a for a in assignments if a.travel_type == TravelType.WITHIN_REGION]
    out_of_region = total - len(within)

    destinations = [
        DestinationCount(name=name, count=sum(1 for a in within if a.destination == name))
        for name in NTB_DESTINATIONS
    ]
    destinations.sort(key=lambda d: d.count, reverse=True)

    return DashboardStats(
        total=total,
        within_region=len(within),
        out_of_region=out_of_region,
        within_region_pct=_percentage(len(within), total),
        out_of_region_pct=_percentage(out_of_region, total),
        destinations=destinations,
    )


def build_dashboard(budget_lines: Sequence[BudgetLine], assignments: Sequence[Assignment]) -> DashboardResponse:
    """Dashboard payload from a full snapshot."""
    return DashboardResponse(
        stats=dashboard_stats(assignments),
        reconciliation=reconcile(budget_lines, assignments),
    )
