"""
Traveler model for the employee roster.
"""
from sqlalchemy import Column, String, Numeric
from sppd.db.base import BaseModel


class Traveler(BaseModel):
    """Employee who can be sent on a travel assignment."""
    __tablename__ = "travelers"

    name = Column(String(200), nullable=False)
    nip = Column(String(30), nullable=True, index=True)  # Civil-servant identifier
    rank = Column(String(100), nullable=True)  # Pangkat / golongan
    position = Column(String(200), nullable=True)  # Jabatan
    representation_within = Column(Numeric(15, 2), nullable=False, default=0)  # Per day, within-region travel
    representation_outside = Column(Numeric(15, 2), nullable=False, default=0)  # Per day, out-of-region travel
