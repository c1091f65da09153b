"""
Pydantic schemas for RateTableEntry entity.
"""
from pydantic import BaseModel, Field
from decimal import Decimal


class RateTableEntryBase(BaseModel):
    """Base rate table schema: the six rates copied onto cost lines."""
    daily_allowance: Decimal = Field(default=Decimal(0), ge=0)
    lodging: Decimal = Field(default=Decimal(0), ge=0)
    fuel_transport: Decimal = Field(default=Decimal(0), ge=0)
    sea_transport: Decimal = Field(default=Decimal(0), ge=0)
    air_transport: Decimal = Field(default=Decimal(0), ge=0)
    local_transport: Decimal = Field(default=Decimal(0), ge=0)


class RateTableEntry(RateTableEntryBase):
    """Rate table entry keyed by destination."""
    destination: str = Field(min_length=1)

    class Config:
        from_attributes = True
