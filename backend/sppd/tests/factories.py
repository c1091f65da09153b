"""
Builders for records used across tests.
"""
from datetime import date
from decimal import Decimal
from sppd.models.assignment import TravelType
from sppd.schemas.assignment import Assignment, CostLine
from sppd.schemas.budget_line import BudgetLine


def make_assignment(assignment_id, budget_line_code, total, destination="Lombok Timur",
                    travel_type=TravelType.WITHIN_REGION, start=date(2024, 1, 10), traveler_id=1):
    """Single-traveler assignment whose total is exactly ``total``."""
    return Assignment(
        id=assignment_id,
        budget_line_code=budget_line_code,
        travel_type=travel_type,
        destination=destination,
        start_date=start,
        end_date=start,
        duration_days=1,
        traveler_ids=[traveler_id],
        cost_lines=[CostLine(traveler_id=traveler_id, fuel_transport=Decimal(total))],
    )


def make_budget_line(code, budget_ceiling, disbursement_ceiling="", name=None):
    return BudgetLine(
        code=code,
        name=name or f"Sub kegiatan {code}",
        budget_ceiling=Decimal(budget_ceiling),
        disbursement_ceiling=disbursement_ceiling,
    )
