"""
Travel assignment model and its per-traveler cost lines.
"""
from sqlalchemy import (
    Column, String, Date, Enum as SQLEnum, ForeignKey, Integer, Numeric, Text, UniqueConstraint
)
from sqlalchemy.orm import relationship
from sppd.db.base import BaseModel
import enum


class TravelType(str, enum.Enum):
    """Travel region enumeration."""
    WITHIN_REGION = "WITHIN_REGION"  # Dalam daerah
    OUT_OF_REGION = "OUT_OF_REGION"  # Luar daerah


class Assignment(BaseModel):
    """Travel assignment (SPT/SPPD) charged to one budget line."""
    __tablename__ = "assignments"

    budget_line_code = Column(String(100), nullable=False, index=True)  # Checked on budget line deletion
    assignment_number = Column(String(100), nullable=True)
    purpose = Column(Text, nullable=True)
    origin = Column(String(200), nullable=True)
    transportation = Column(String(100), nullable=True)
    travel_type = Column(SQLEnum(TravelType), default=TravelType.WITHIN_REGION, nullable=False)
    destination = Column(String(200), nullable=False, index=True)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False)
    duration_days = Column(Integer, nullable=False, default=0)

    # Relationships
    cost_lines = relationship(
        "CostLine",
        back_populates="assignment",
        cascade="all, delete-orphan",
        order_by="CostLine.position",
    )


class CostLine(BaseModel):
    """Priced cost breakdown for one traveler on one assignment."""
    __tablename__ = "cost_lines"

    assignment_id = Column(Integer, ForeignKey("assignments.id"), nullable=False, index=True)
    traveler_id = Column(Integer, ForeignKey("travelers.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)  # Order of selection on the assignment

    daily_allowance = Column(Numeric(15, 2), nullable=False, default=0)
    daily_days = Column(Integer, nullable=False, default=0)
    lodging = Column(Numeric(15, 2), nullable=False, default=0)
    lodging_days = Column(Integer, nullable=False, default=0)  # Nights
    fuel_transport = Column(Numeric(15, 2), nullable=False, default=0)
    sea_transport = Column(Numeric(15, 2), nullable=False, default=0)
    air_transport = Column(Numeric(15, 2), nullable=False, default=0)
    local_transport = Column(Numeric(15, 2), nullable=False, default=0)
    representation = Column(Numeric(15, 2), nullable=False, default=0)
    representation_days = Column(Integer, nullable=False, default=0)

    # Relationships
    assignment = relationship("Assignment", back_populates="cost_lines")

    # Unique constraint: one cost line per traveler per assignment
    __table_args__ = (
        UniqueConstraint('assignment_id', 'traveler_id', name='uq_assignment_traveler'),
    )
