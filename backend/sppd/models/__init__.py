"""Models package - Import all models for SQLAlchemy registration."""
from sppd.models.traveler import Traveler
from sppd.models.budget_line import BudgetLine
from sppd.models.rate_table import RateTableEntry
from sppd.models.assignment import Assignment, CostLine, TravelType

__all__ = [
    "Traveler",
    "BudgetLine",
    "RateTableEntry",
    "Assignment",
    "CostLine",
    "TravelType",
]
