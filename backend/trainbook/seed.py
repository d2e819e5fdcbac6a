#!/usr/bin/env python3
"""
Seed the database with the default Karnataka network.

Usage:
  python -m trainbook.seed           # create tables, load data if empty
  python -m trainbook.seed --reset   # wipe bookings, fares and stations first
"""

import argparse
import asyncio
from decimal import Decimal

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.core.logging import setup_logging, get_logger
from trainbook.db.session import init_engine, dispose_engine, create_tables, get_sessionmaker
from trainbook.models import Station, Fare, Booking

logger = get_logger(__name__)

STATIONS = [
    (1, "Bengaluru (SBC)", "SBC"),
    (2, "Mysuru (MYS)", "MYS"),
    (3, "Mangaluru (MAQ)", "MAQ"),
    (4, "Hubballi (HUBL)", "HUBL"),
]

# (from, to, ac, sleeper, passenger). Stored one way; lookups try both.
FARES = [
    (1, 2, "450.00", "180.00", "75.00"),
    (1, 3, "1250.00", "420.00", "190.00"),
    (1, 4, "1150.00", "390.00", "175.00"),
    (2, 3, "1050.00", "360.00", "160.00"),
    (2, 4, "1300.00", "440.00", "200.00"),
    (3, 4, "980.00", "340.00", "150.00"),
]


async def seed(session: AsyncSession, reset: bool = False) -> bool:
    """Load stations and fares. Returns False if data was already present."""
    if reset:
        logger.info("seed_reset")
        await session.execute(delete(Booking))
        await session.execute(delete(Fare))
        await session.execute(delete(Station))
        await session.flush()
        session.expunge_all()

    existing = (await session.execute(select(func.count()).select_from(Station))).scalar()
    if existing:
        logger.info("seed_skipped", stations=existing)
        return False

    session.add_all(Station(id=sid, name=name, code=code) for sid, name, code in STATIONS)
    await session.flush()

    session.add_all(
        Fare(
            from_station_id=from_id,
            to_station_id=to_id,
            fare_ac=Decimal(ac),
            fare_sleeper=Decimal(sleeper),
            fare_passenger=Decimal(passenger),
        )
        for from_id, to_id, ac, sleeper, passenger in FARES
    )
    await session.commit()

    logger.info("seed_completed", stations=len(STATIONS), fares=len(FARES))
    return True


async def main(reset: bool = False) -> None:
    setup_logging()
    engine = init_engine()
    try:
        await create_tables(engine)
        async with get_sessionmaker()() as session:
            await seed(session, reset=reset)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed stations and fares")
    parser.add_argument("--reset", action="store_true", help="delete existing data first")
    args = parser.parse_args()
    asyncio.run(main(reset=args.reset))
