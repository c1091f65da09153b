"""
Pydantic schemas for BudgetLine entity.
"""
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal, ROUND_HALF_UP
from sppd.core.utils import parse_amount


class BudgetLineBase(BaseModel):
    """Base budget line schema."""
    name: str
    budget_ceiling: Decimal = Field(default=Decimal(0), ge=0)
    disbursement_ceiling: str = ""  # Free-form, e.g. "6.000.000"; blank counts as 0
    quarter_1: Decimal = Decimal(0)
    quarter_2: Decimal = Decimal(0)
    quarter_3: Decimal = Decimal(0)
    quarter_4: Decimal = Decimal(0)

    @field_validator("disbursement_ceiling", mode="before")
    @classmethod
    def coerce_disbursement_ceiling(cls, v):
        """Accept numbers (kept to the cent) and null for the free-form ceiling."""
        if v is None:
            return ""
        if isinstance(v, (int, float, Decimal)):
            return format(Decimal(str(v)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP), "f")
        return str(v)

    @property
    def disbursement_ceiling_amount(self) -> Decimal:
        """Numeric value of the disbursement ceiling."""
        return parse_amount(self.disbursement_ceiling)


class BudgetLineUpsert(BudgetLineBase):
    """Schema for creating or replacing a budget line under a code."""
    pass


class BudgetLine(BudgetLineBase):
    """Budget line record as stored."""
    code: str = Field(min_length=1)

    class Config:
        from_attributes = True
