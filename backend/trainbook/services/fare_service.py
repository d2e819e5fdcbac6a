"""
Fare resolution between two stations.

FARE LOOKUP
===========

Fares are stored per ordered pair (from, to) but priced symmetrically:
  1. Look up the row for (from, to)
  2. If there is no such row, look up (to, from)
  3. Pick the column for the travel class from whichever row was found

Class selection is deliberately loose. The reservation type is lower-cased and
compared against "ac" and "sleeper"; every other value, including unknown
ones such as "business", is charged the unreserved (passenger) fare.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.models.fare import Fare
from trainbook.core.exceptions import InvalidInput, FareNotFound, StoreUnavailable
from trainbook.core.logging import get_logger
from trainbook.core.metrics import record_fare_lookup, record_db_operation

logger = get_logger(__name__)

PREMIUM_CLASS = "ac"
SLEEPER_CLASS = "sleeper"


def select_class_fare(fare: Fare, travel_class: str) -> Optional[Decimal]:
    """Pick the fare column for a reservation type (case-insensitive)."""
    normalized = travel_class.lower()
    if normalized == PREMIUM_CLASS:
        return fare.fare_ac
    if normalized == SLEEPER_CLASS:
        return fare.fare_sleeper
    return fare.fare_passenger


async def _get_fare_row(db: AsyncSession, from_id: int, to_id: int) -> Optional[Fare]:
    result = await db.execute(
        select(Fare)
        .where(Fare.from_station_id == from_id, Fare.to_station_id == to_id)
        .limit(1)
    )
    return result.scalar_one_or_none()


async def resolve_fare(
    db: AsyncSession,
    from_id: Optional[int],
    to_id: Optional[int],
    travel_class: Optional[str],
) -> Decimal:
    """
    Resolve the fare for a journey, trying the reverse direction if needed.
    Raises InvalidInput for missing or identical stations, FareNotFound when
    neither direction has a row or the class column is empty.
    """
    if not from_id or not to_id or not travel_class:
        raise InvalidInput("Missing parameters")
    if from_id == to_id:
        raise InvalidInput("From and To must be different")

    try:
        fare = await _get_fare_row(db, from_id, to_id)
        resolution = "forward"
        if fare is None:
            fare = await _get_fare_row(db, to_id, from_id)
            resolution = "reverse"
    except SQLAlchemyError as e:
        record_db_operation("error")
        logger.error("fare_lookup_failed", from_station=from_id, to_station=to_id, error=str(e))
        raise StoreUnavailable("Error calculating fare") from e

    record_db_operation("read")

    amount = select_class_fare(fare, travel_class) if fare is not None else None
    if amount is None:
        record_fare_lookup("missing")
        logger.info(
            "fare_not_found",
            from_station=from_id,
            to_station=to_id,
            travel_class=travel_class,
        )
        raise FareNotFound("Fare not found for selected route")

    record_fare_lookup(resolution)
    logger.debug(
        "fare_resolved",
        from_station=from_id,
        to_station=to_id,
        travel_class=travel_class,
        resolution=resolution,
        amount=str(amount),
    )
    return Decimal(amount)
