"""
Pydantic schemas for Traveler entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from sppd.models.assignment import TravelType


class TravelerBase(BaseModel):
    """Base traveler schema."""
    name: str = Field(min_length=1)
    nip: Optional[str] = None
    rank: Optional[str] = None
    position: Optional[str] = None
    representation_within: Decimal = Field(default=Decimal(0), ge=0)  # Per day, within-region travel
    representation_outside: Decimal = Field(default=Decimal(0), ge=0)  # Per day, out-of-region travel


class TravelerCreate(TravelerBase):
    """Schema for traveler creation."""
    pass


class TravelerUpdate(BaseModel):
    """Schema for traveler update."""
    name: Optional[str] = Field(default=None, min_length=1)
    nip: Optional[str] = None
    rank: Optional[str] = None
    position: Optional[str] = None
    representation_within: Optional[Decimal] = Field(default=None, ge=0)
    representation_outside: Optional[Decimal] = Field(default=None, ge=0)


class Traveler(TravelerBase):
    """Traveler record; id is None until first saved."""
    id: Optional[int] = None

    class Config:
        from_attributes = True

    def representation_rate(self, travel_type: TravelType) -> Decimal:
        """Representation allowance per day for the given travel type."""
        if travel_type == TravelType.OUT_OF_REGION:
            return self.representation_outside
        return self.representation_within
