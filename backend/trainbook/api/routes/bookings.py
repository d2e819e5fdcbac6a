"""
Booking endpoints: create a booking and list a user's bookings.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.db.session import get_db
from trainbook.schemas.booking import BookingCreate, BookingCreatedResponse, BookingListResponse
from trainbook.services.booking_service import create_booking, list_bookings_for_user

router = APIRouter(tags=["Bookings"])


@router.post("/book", response_model=BookingCreatedResponse)
async def book_ticket(booking_data: BookingCreate, db: AsyncSession = Depends(get_db)):
    """
    Book a ticket.

    The fare is resolved server-side and stored with the booking; the
    response carries the stored row with station names attached.
    """
    booking = await create_booking(
        db,
        user_id=booking_data.user_id,
        passenger_name=booking_data.passenger_name,
        age=booking_data.age,
        travel_class=booking_data.reservation_type,
        travel_date=booking_data.travel_date,
        from_id=booking_data.from_station_id,
        to_id=booking_data.to_station_id,
    )
    return BookingCreatedResponse(booking=booking)


@router.get("/my-bookings", response_model=BookingListResponse)
async def my_bookings(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: AsyncSession = Depends(get_db),
):
    """Get all bookings for a user, newest first."""
    bookings = await list_bookings_for_user(db, user_id)
    return BookingListResponse(count=len(bookings), bookings=bookings)
