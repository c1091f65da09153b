"""
Shared fixtures: an in-memory database, a record store on it, and an API client.
"""
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import sppd.models  # noqa: F401
from sppd.db.base import Base
from sppd.db.session import get_db
from sppd.main import app
from sppd.schemas.rate_table import RateTableEntry
from sppd.schemas.traveler import Traveler
from sppd.services.record_store import SqlAlchemyRecordStore


@pytest.fixture
def db():
    """Fresh in-memory SQLite session per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db):
    return SqlAlchemyRecordStore(db)


@pytest.fixture
def client(db):
    """API client whose requests all use the test session."""
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lombok_timur_rates():
    return RateTableEntry(
        destination="Lombok Timur",
        daily_allowance=Decimal(150000),
        lodging=Decimal(300000),
        fuel_transport=Decimal(100000),
        sea_transport=Decimal(0),
        air_transport=Decimal(0),
        local_transport=Decimal(50000),
    )


@pytest.fixture
def bima_rates():
    return RateTableEntry(
        destination="Bima",
        daily_allowance=Decimal(200000),
        lodging=Decimal(450000),
        fuel_transport=Decimal(0),
        sea_transport=Decimal(0),
        air_transport=Decimal(900000),
        local_transport=Decimal(75000),
    )


@pytest.fixture
def travelers():
    return [
        Traveler(
            id=1, name="Baiq Nurul Aini", nip="198503122010012001",
            rank="Penata / III c", position="Analis Kebijakan",
            representation_within=Decimal(100000), representation_outside=Decimal(150000),
        ),
        Traveler(
            id=2, name="Lalu Muhammad Zaini", nip="197907152005011004",
            rank="Pembina / IV a", position="Kepala Bidang",
            representation_within=Decimal(125000), representation_outside=Decimal(200000),
        ),
    ]

