"""
Cost aggregation: cost line totals and assignment totals.
"""
from decimal import Decimal
from typing import Dict, Mapping, Optional
from sppd.core.config import settings
from sppd.core.utils import amount_to_words, format_number
from sppd.schemas.assignment import (
    Assignment, AssignmentCostSummary, CostLine, CostLineBreakdown
)
from sppd.schemas.traveler import Traveler


def transport_subtotal(line: CostLine) -> Decimal:
    """Fuel, sea, air and local transport together."""
    return line.fuel_transport + line.sea_transport + line.air_transport + line.local_transport


def line_total(line: CostLine) -> Decimal:
    """
    Total of one cost line:
    daily x days + lodging x nights + transports + representation x days.
    """
    return (
        line.daily_allowance * line.daily_days
        + line.lodging * line.lodging_days
        + transport_subtotal(line)
        + line.representation * line.representation_days
    )


def assignment_total(assignment: Assignment) -> Decimal:
    """Sum of line_total over all cost lines of an assignment."""
    return sum((line_total(line) for line in assignment.cost_lines), Decimal(0))


def traveler_totals(assignment: Assignment) -> Dict[int, Decimal]:
    """Traveler id -> total of that traveler's cost line."""
    return {line.traveler_id: line_total(line) for line in assignment.cost_lines}


def line_breakdown(line: CostLine, traveler: Optional[Traveler] = None) -> CostLineBreakdown:
    """Subtotals of a cost line for the printed cost attachment."""
    total = line_total(line)
    return CostLineBreakdown(
        traveler_id=line.traveler_id,
        traveler_name=traveler.name if traveler else None,
        daily_subtotal=line.daily_allowance * line.daily_days,
        lodging_subtotal=line.lodging * line.lodging_days,
        transport_subtotal=transport_subtotal(line),
        representation_subtotal=line.representation * line.representation_days,
        total=total,
        total_words=amount_to_words(total),
    )


def summarize_costs(
    assignment: Assignment,
    travelers: Mapping[int, Traveler],
) -> AssignmentCostSummary:
    """Per-traveler breakdown and grand total, as consumed by the document layer."""
    total = assignment_total(assignment)
    return AssignmentCostSummary(
        assignment_id=assignment.id,
        lines=[line_breakdown(line, travelers.get(line.traveler_id)) for line in assignment.cost_lines],
        total=total,
        total_formatted=f"{settings.CURRENCY_LABEL} {format_number(total)}",
        total_words=amount_to_words(total),
    )
