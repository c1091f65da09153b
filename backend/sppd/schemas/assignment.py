"""
Pydantic schemas for Assignment and CostLine entities.
"""
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from datetime import date
from decimal import Decimal
from sppd.models.assignment import TravelType

# Cost line fields overwritten by a rate table look-up
RATE_FIELDS = (
    "daily_allowance",
    "lodging",
    "fuel_transport",
    "sea_transport",
    "air_transport",
    "local_transport",
)

# Cost line fields a user may edit by hand
EDITABLE_FIELDS = RATE_FIELDS + ("representation",)


class CostLine(BaseModel):
    """Priced cost breakdown for one traveler."""
    traveler_id: int
    daily_allowance: Decimal = Field(default=Decimal(0), ge=0)
    daily_days: int = Field(default=0, ge=0)
    lodging: Decimal = Field(default=Decimal(0), ge=0)
    lodging_days: int = Field(default=0, ge=0)  # Nights
    fuel_transport: Decimal = Field(default=Decimal(0), ge=0)
    sea_transport: Decimal = Field(default=Decimal(0), ge=0)
    air_transport: Decimal = Field(default=Decimal(0), ge=0)
    local_transport: Decimal = Field(default=Decimal(0), ge=0)
    representation: Decimal = Field(default=Decimal(0), ge=0)
    representation_days: int = Field(default=0, ge=0)

    class Config:
        from_attributes = True


class CostLineUpdate(BaseModel):
    """Manual override of cost line amounts; day counts always follow the dates."""
    daily_allowance: Optional[Decimal] = Field(default=None, ge=0)
    lodging: Optional[Decimal] = Field(default=None, ge=0)
    fuel_transport: Optional[Decimal] = Field(default=None, ge=0)
    sea_transport: Optional[Decimal] = Field(default=None, ge=0)
    air_transport: Optional[Decimal] = Field(default=None, ge=0)
    local_transport: Optional[Decimal] = Field(default=None, ge=0)
    representation: Optional[Decimal] = Field(default=None, ge=0)


class AssignmentBase(BaseModel):
    """Base assignment schema."""
    budget_line_code: str = ""
    assignment_number: Optional[str] = None
    purpose: Optional[str] = None
    origin: Optional[str] = None
    transportation: Optional[str] = None
    travel_type: TravelType = TravelType.WITHIN_REGION
    destination: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    duration_days: int = Field(default=0, ge=0)  # Inclusive, derived from the dates
    traveler_ids: List[int] = []
    cost_lines: List[CostLine] = []

    @model_validator(mode="after")
    def check_consistency(self):
        """Dates in order, and exactly one cost line per selected traveler."""
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        if len(set(self.traveler_ids)) != len(self.traveler_ids):
            raise ValueError("traveler_ids contains duplicates")
        line_ids = [line.traveler_id for line in self.cost_lines]
        if len(set(line_ids)) != len(line_ids):
            raise ValueError("more than one cost line for the same traveler")
        unknown = [tid for tid in line_ids if tid not in self.traveler_ids]
        if unknown:
            raise ValueError(f"cost lines reference travelers not on the assignment: {unknown}")
        missing = [tid for tid in self.traveler_ids if tid not in line_ids]
        if missing:
            raise ValueError(f"travelers without a cost line: {missing}")
        return self

    def cost_line_for(self, traveler_id: int) -> Optional[CostLine]:
        for line in self.cost_lines:
            if line.traveler_id == traveler_id:
                return line
        return None


class Assignment(AssignmentBase):
    """Assignment record; id is None until first saved."""
    id: Optional[int] = None

    class Config:
        from_attributes = True


class AssignmentDraft(Assignment):
    """
    Assignment being edited, plus the destination whose rates were last
    copied onto the cost lines automatically.
    """
    last_auto_destination: Optional[str] = None


class AssignmentResponse(Assignment):
    """Schema for assignment response with its computed total."""
    total: Decimal


class DateChange(BaseModel):
    """Schema for changing the travel dates of a draft."""
    draft: AssignmentDraft
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class DestinationChange(BaseModel):
    """Schema for changing the destination of a draft."""
    draft: AssignmentDraft
    destination: str


class TravelTypeChange(BaseModel):
    """Schema for switching a draft between within- and out-of-region."""
    draft: AssignmentDraft
    travel_type: TravelType


class CostLineOverride(BaseModel):
    """Schema for manually editing one traveler's cost line on a draft."""
    draft: AssignmentDraft
    changes: CostLineUpdate


class CostLineBreakdown(BaseModel):
    """Subtotals of one cost line as printed on the cost attachment."""
    traveler_id: int
    traveler_name: Optional[str] = None
    daily_subtotal: Decimal
    lodging_subtotal: Decimal
    transport_subtotal: Decimal  # Fuel + sea + air + local
    representation_subtotal: Decimal
    total: Decimal
    total_words: str


class AssignmentCostSummary(BaseModel):
    """Per-traveler breakdown and grand total of an assignment."""
    assignment_id: int
    lines: List[CostLineBreakdown] = []
    total: Decimal
    total_formatted: str  # e.g. "Rp 1.200.000"
    total_words: str  # Indonesian spelled-out total
