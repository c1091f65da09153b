"""
Rate table model: standard cost rates per destination.
"""
from sqlalchemy import Column, String, Numeric
from sppd.db.base import BaseModel


class RateTableEntry(BaseModel):
    """Per-destination daily allowance, lodging and transport rates."""
    __tablename__ = "rate_table_entries"

    destination = Column(String(200), unique=True, nullable=False, index=True)  # Case-sensitive exact key
    daily_allowance = Column(Numeric(15, 2), nullable=False, default=0)
    lodging = Column(Numeric(15, 2), nullable=False, default=0)
    fuel_transport = Column(Numeric(15, 2), nullable=False, default=0)
    sea_transport = Column(Numeric(15, 2), nullable=False, default=0)
    air_transport = Column(Numeric(15, 2), nullable=False, default=0)
    local_transport = Column(Numeric(15, 2), nullable=False, default=0)
