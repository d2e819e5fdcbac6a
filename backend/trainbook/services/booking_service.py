"""
Booking service: the fare-and-booking transaction.

BOOKING FLOW
============

  1. Structural validation - every field present and non-empty
  2. Date validation - travel date parses and is not before today
     (calendar days on the server clock, time of day ignored)
  3. Fare resolution - forward pair, then reverse pair
  4. Persist - one INSERT, committed on its own; a failure rolls back
     and leaves no row behind
  5. Read-back - re-select the row joined to stations for display names

Nothing is retried. Any store error is terminal for the request and is
reported with a generic message; details only go to the log.
"""

import time
from datetime import date, datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from trainbook.models.booking import Booking
from trainbook.models.station import Station
from trainbook.schemas.booking import BookingDetail
from trainbook.services.fare_service import resolve_fare
from trainbook.core.exceptions import (
    BookingAppError,
    MissingFields,
    InvalidDate,
    InvalidInput,
    PersistenceFailure,
    StoreUnavailable,
)
from trainbook.core.logging import get_logger
from trainbook.core.metrics import record_booking_attempt, record_db_operation, booking_latency

logger = get_logger(__name__)

FromStation = aliased(Station, name="from_stn")
ToStation = aliased(Station, name="to_stn")


def today() -> date:
    """Current calendar day on the server clock."""
    return date.today()


def parse_travel_date(value) -> Optional[date]:
    """Parse an ISO date (or the date part of an ISO datetime). None if invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _detail_query():
    return (
        select(
            Booking.id,
            Booking.passenger_name,
            Booking.age,
            Booking.travel_class.label("travel_class"),
            Booking.travel_date,
            Booking.amount,
            Booking.from_station_id,
            Booking.to_station_id,
            FromStation.name.label("from_station"),
            ToStation.name.label("to_station"),
        )
        .outerjoin(FromStation, FromStation.id == Booking.from_station_id)
        .outerjoin(ToStation, ToStation.id == Booking.to_station_id)
    )


def _to_detail(row, fill_missing_names: bool = False) -> BookingDetail:
    from_station = row.from_station
    to_station = row.to_station
    if fill_missing_names:
        from_station = from_station or f"Station {row.from_station_id}"
        to_station = to_station or f"Station {row.to_station_id}"

    return BookingDetail(
        id=row.id,
        passenger_name=row.passenger_name,
        age=row.age,
        travel_class=row.travel_class,
        travel_date=row.travel_date,
        amount=float(row.amount),
        from_station=from_station,
        to_station=to_station,
    )


async def _create_booking(
    db: AsyncSession,
    user_id,
    passenger_name,
    age,
    travel_class,
    travel_date,
    from_id,
    to_id,
) -> BookingDetail:
    fields = (user_id, passenger_name, age, travel_class, travel_date, from_id, to_id)
    if not all(fields):
        logger.info("booking_rejected", reason="missing_fields")
        raise MissingFields("Missing booking fields")

    parsed_date = parse_travel_date(travel_date)
    if parsed_date is None or parsed_date < today():
        logger.info("booking_rejected", reason="invalid_date", travel_date=str(travel_date))
        raise InvalidDate("Invalid or past travel date")

    amount = await resolve_fare(db, from_id, to_id, travel_class)

    booking = Booking(
        user_id=user_id,
        passenger_name=passenger_name,
        age=age,
        travel_class=travel_class,
        travel_date=parsed_date,
        from_station_id=from_id,
        to_station_id=to_id,
        amount=amount,
    )
    try:
        db.add(booking)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        record_db_operation("error")
        logger.error("booking_insert_failed", user_id=user_id, error=str(e))
        raise PersistenceFailure("Could not complete booking") from e

    record_db_operation("write")
    booking_id = booking.id

    try:
        result = await db.execute(_detail_query().where(Booking.id == booking_id).limit(1))
        row = result.first()
    except SQLAlchemyError as e:
        record_db_operation("error")
        logger.error("booking_readback_failed", booking_id=booking_id, error=str(e))
        raise PersistenceFailure(
            "Booking created but could not fetch details", booking_id=booking_id
        ) from e

    if row is None:
        logger.error("booking_readback_missing", booking_id=booking_id)
        raise PersistenceFailure(
            "Booking created but could not fetch details", booking_id=booking_id
        )

    record_db_operation("read")
    logger.info(
        "booking_created",
        booking_id=booking_id,
        user_id=user_id,
        from_station=from_id,
        to_station=to_id,
        travel_class=travel_class,
        amount=str(amount),
    )
    return _to_detail(row, fill_missing_names=True)


async def create_booking(
    db: AsyncSession,
    user_id: Optional[int],
    passenger_name: Optional[str],
    age: Optional[int],
    travel_class: Optional[str],
    travel_date,
    from_id: Optional[int],
    to_id: Optional[int],
) -> BookingDetail:
    """
    Validate, price, and persist one booking, then return it with station names.
    Exactly one row is written on success and none on any failure.
    """
    start = time.perf_counter()
    try:
        detail = await _create_booking(
            db, user_id, passenger_name, age, travel_class, travel_date, from_id, to_id
        )
    except (PersistenceFailure, StoreUnavailable):
        record_booking_attempt("error")
        raise
    except BookingAppError:
        record_booking_attempt("rejected")
        raise
    finally:
        booking_latency.observe(time.perf_counter() - start)

    record_booking_attempt("success")
    return detail


async def list_bookings_for_user(db: AsyncSession, user_id) -> list[BookingDetail]:
    """Get all bookings for a user, newest first."""
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        user_id = 0
    if not user_id:
        raise InvalidInput("Missing userId")

    try:
        result = await db.execute(
            _detail_query()
            .where(Booking.user_id == user_id)
            .order_by(Booking.created_at.desc(), Booking.id.desc())
        )
        rows = result.all()
    except SQLAlchemyError as e:
        record_db_operation("error")
        logger.error("bookings_load_failed", user_id=user_id, error=str(e))
        raise StoreUnavailable("Could not load bookings") from e

    record_db_operation("read")
    return [_to_detail(row) for row in rows]
