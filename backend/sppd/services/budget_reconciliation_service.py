"""
Budget reconciliation: realized spending per budget line against its ceilings.

Everything here is recomputed from the full snapshot of assignments on each
call; nothing is cached between calls.
"""
from decimal import Decimal
from typing import Iterable, List, Sequence
from sppd.schemas.assignment import Assignment
from sppd.schemas.budget_line import BudgetLine
from sppd.schemas.reconciliation import BudgetLineReconciliation, ReconciliationReport
from sppd.services.cost_aggregation_service import assignment_total


def referencing_assignments(budget_line_code: str, assignments: Iterable[Assignment]) -> List[Assignment]:
    """Assignments charged to a budget line."""
    return [a for a in assignments if a.budget_line_code == budget_line_code]


def realize(budget_line_code: str, assignments: Iterable[Assignment]) -> Decimal:
    """
    Cumulative realized spending of a budget line: the sum of the totals of
    every assignment charged to it, regardless of period.
    """
    return sum(
        (assignment_total(a) for a in referencing_assignments(budget_line_code, assignments)),
        Decimal(0),
    )


def reconcile(budget_lines: Iterable[BudgetLine], assignments: Sequence[Assignment]) -> ReconciliationReport:
    """
    Realized and remaining figures per funded budget line, plus global sums.

    Lines with a zero ceiling are not funded yet and are left out of the
    report; their assignments contribute to no total. Remaining figures go
    negative when a line is over-realized.
    """
    report = ReconciliationReport()
    for line in budget_lines:
        if line.budget_ceiling <= 0:
            continue
        charged = referencing_assignments(line.code, assignments)
        realized = sum((assignment_total(a) for a in charged), Decimal(0))
        disbursement_ceiling = line.disbursement_ceiling_amount
        item = BudgetLineReconciliation(
            code=line.code,
            name=line.name,
            budget_ceiling=line.budget_ceiling,
            disbursement_ceiling=disbursement_ceiling,
            realized=realized,
            remaining_disbursement=disbursement_ceiling - realized,
            remaining_budget=line.budget_ceiling - realized,
            assignment_count=len(charged),
        )
        report.lines.append(item)
        report.total_budget_ceiling += item.budget_ceiling
        report.total_disbursement_ceiling += item.disbursement_ceiling
        report.total_realized += item.realized
        report.total_remaining_disbursement += item.remaining_disbursement
        report.total_remaining_budget += item.remaining_budget
    return report


def can_delete(budget_line_code: str, assignments: Iterable[Assignment]) -> bool:
    """False while any assignment is charged to the budget line."""
    return not referencing_assignments(budget_line_code, assignments)
