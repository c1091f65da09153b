"""
Budget line model (sub-activity budget code).
"""
from sqlalchemy import Column, String, Numeric
from sppd.db.base import BaseModel


class BudgetLine(BaseModel):
    """Spending category charged by travel assignments."""
    __tablename__ = "budget_lines"

    code = Column(String(100), unique=True, nullable=False, index=True)
    name = Column(String(500), nullable=False)
    budget_ceiling = Column(Numeric(15, 2), nullable=False, default=0)
    disbursement_ceiling = Column(String(50), nullable=False, default="")  # Free-form, parsed when reconciled

    # Quarterly allocations, informational only
    quarter_1 = Column(Numeric(15, 2), nullable=False, default=0)
    quarter_2 = Column(Numeric(15, 2), nullable=False, default=0)
    quarter_3 = Column(Numeric(15, 2), nullable=False, default=0)
    quarter_4 = Column(Numeric(15, 2), nullable=False, default=0)
