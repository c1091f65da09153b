"""
Database initialization script.
"""
from sppd.db.session import init_db

# Import all models so SQLAlchemy can register them
from sppd.models import (  # noqa: F401
    Traveler, BudgetLine, RateTableEntry, Assignment, CostLine
)

if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
