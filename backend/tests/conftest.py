"""
Pytest fixtures for test database, client, and reference data.

Each test gets a fresh in-memory SQLite database, so no cleanup is needed.
"""

from datetime import date
from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from trainbook.main import app
from trainbook.db.base import Base
from trainbook.db.session import get_db
from trainbook.core.security import hash_password
from trainbook.models import Station, Fare, User

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create the schema in a private database and yield a session on it."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def stations(db_session: AsyncSession) -> list[Station]:
    """Stations A (id=1) and B (id=2), plus an unconnected C (id=3)."""
    rows = [
        Station(id=1, name="Bengaluru (SBC)", code="SBC"),
        Station(id=2, name="Mysuru (MYS)", code="MYS"),
        Station(id=3, name="Hubballi (HUBL)", code="HUBL"),
    ]
    db_session.add_all(rows)
    await db_session.commit()
    return rows


@pytest_asyncio.fixture
async def fare(db_session: AsyncSession, stations) -> Fare:
    """Fare stored only in the 1 -> 2 direction."""
    row = Fare(
        from_station_id=1,
        to_station_id=2,
        fare_ac=Decimal("500"),
        fare_sleeper=Decimal("300"),
        fare_passenger=Decimal("100"),
    )
    db_session.add(row)
    await db_session.commit()
    return row


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> User:
    user = User(
        id=7,
        name="Test Rider",
        email="rider@example.com",
        password_hash=hash_password("rider-password"),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
def booking_payload(test_user, fare) -> dict:
    return {
        "userId": test_user.id,
        "passengerName": "Asha",
        "age": 29,
        "reservationType": "sleeper",
        "travelDate": date.today().isoformat(),
        "fromStationId": 1,
        "toStationId": 2,
    }
