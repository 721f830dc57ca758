"""Test configuration and fixtures"""

import os

# Point settings at SQLite before the app module builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "console")

from datetime import date, time

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.reservation import Reservation
from app.models.table import Table


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# A Wednesday far enough ahead to never be in the past
FUTURE_DATE = "2999-01-09"


def reservation_data(**overrides):
    """Valid create/update payload, fields replaced by ``overrides``"""
    data = {
        "first_name": "Rick",
        "last_name": "Sanchez",
        "mobile_number": "202-555-0164",
        "reservation_date": FUTURE_DATE,
        "reservation_time": "18:00",
        "people": 2,
    }
    data.update(overrides)
    return data


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def booked_reservation(test_db):
    """Create a booked reservation"""
    reservation = Reservation(
        first_name="Frank",
        last_name="Palicky",
        mobile_number="(202) 555-0153",
        reservation_date=date(2999, 1, 9),
        reservation_time=time(13, 30),
        people=4,
        status="booked",
    )
    test_db.add(reservation)
    await test_db.commit()

    return reservation


@pytest.fixture
async def seated_reservation(test_db):
    """Create a reservation already seated"""
    reservation = Reservation(
        first_name="Bird",
        last_name="Person",
        mobile_number="808-555-0141",
        reservation_date=date(2999, 1, 9),
        reservation_time=time(19, 0),
        people=2,
        status="seated",
    )
    test_db.add(reservation)
    await test_db.commit()

    return reservation


@pytest.fixture
async def test_tables(test_db):
    """Create test tables"""
    tables = [
        Table(table_name="Bar #1", capacity=1),
        Table(table_name="#1", capacity=6),
    ]

    for table in tables:
        test_db.add(table)

    await test_db.commit()
    return tables


@pytest.fixture
async def client(test_db):
    """Create test client with overridden database"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def make_reservation_data():
    """Factory for valid reservation payloads"""
    return reservation_data
