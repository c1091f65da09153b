"""
Tests for cost line and assignment totals.
"""
from decimal import Decimal
from sppd.schemas.assignment import Assignment, CostLine
from sppd.services.cost_aggregation_service import (
    assignment_total, line_breakdown, line_total, summarize_costs, traveler_totals
)


def _line(traveler_id=1, **fields):
    return CostLine(traveler_id=traveler_id, **fields)


def test_line_total_multiplies_rates_by_days():
    line = _line(
        daily_allowance=Decimal(150000), daily_days=3,
        lodging=Decimal(300000), lodging_days=2,
        fuel_transport=Decimal(100000), local_transport=Decimal(50000),
        representation=Decimal(100000), representation_days=3,
    )
    assert line_total(line) == Decimal(1500000)


def test_line_total_of_empty_line_is_zero():
    assert line_total(_line()) == Decimal(0)


def test_transports_are_not_multiplied_by_days():
    line = _line(
        daily_days=4, lodging_days=3, representation_days=4,
        fuel_transport=Decimal(10), sea_transport=Decimal(20),
        air_transport=Decimal(30), local_transport=Decimal(40),
    )
    assert line_total(line) == Decimal(100)


def test_assignment_total_sums_lines():
    assignment = Assignment(
        traveler_ids=[1, 2],
        cost_lines=[
            _line(1, daily_allowance=Decimal(150000), daily_days=2),
            _line(2, air_transport=Decimal(900000)),
        ],
    )
    assert assignment_total(assignment) == Decimal(1200000)
    assert traveler_totals(assignment) == {1: Decimal(300000), 2: Decimal(900000)}


def test_assignment_without_travelers_totals_zero():
    total = assignment_total(Assignment())
    assert total == Decimal(0)
    assert isinstance(total, Decimal)


def test_line_breakdown_subtotals(travelers):
    line = _line(
        daily_allowance=Decimal(150000), daily_days=3,
        lodging=Decimal(300000), lodging_days=2,
        fuel_transport=Decimal(100000), local_transport=Decimal(50000),
        representation=Decimal(100000), representation_days=3,
    )

    breakdown = line_breakdown(line, travelers[0])

    assert breakdown.traveler_name == "Baiq Nurul Aini"
    assert breakdown.daily_subtotal == Decimal(450000)
    assert breakdown.lodging_subtotal == Decimal(600000)
    assert breakdown.transport_subtotal == Decimal(150000)
    assert breakdown.representation_subtotal == Decimal(300000)
    assert breakdown.total == Decimal(1500000)
    assert breakdown.total_words == "satu juta lima ratus ribu"


def test_summarize_costs(travelers):
    assignment = Assignment(
        id=7,
        traveler_ids=[2, 1],
        cost_lines=[
            _line(2, air_transport=Decimal(900000)),
            _line(1, lodging=Decimal(150000), lodging_days=2),
        ],
    )

    summary = summarize_costs(assignment, {t.id: t for t in travelers})

    assert summary.assignment_id == 7
    assert [line.traveler_id for line in summary.lines] == [2, 1]
    assert summary.lines[0].traveler_name == "Lalu Muhammad Zaini"
    assert summary.total == Decimal(1200000)
    assert summary.total_formatted == "Rp 1.200.000"
    assert summary.total_words == "satu juta dua ratus ribu"
