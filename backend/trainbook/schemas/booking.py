"""
Pydantic schemas for booking-related request/response validation.

Fields on `BookingCreate` are optional so that presence checks happen in the
booking service and surface as a single "missing fields" error.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from trainbook.schemas.common import CamelRequest


class BookingCreate(CamelRequest):
    user_id: Optional[int] = None
    passenger_name: Optional[str] = None
    age: Optional[int] = None
    reservation_type: Optional[str] = None
    travel_date: Optional[str] = None
    from_station_id: Optional[int] = None
    to_station_id: Optional[int] = None


class BookingDetail(BaseModel):
    id: int
    passenger_name: str
    age: int
    travel_class: str = Field(serialization_alias="class")
    travel_date: date
    amount: float
    from_station: Optional[str]
    to_station: Optional[str]


class BookingCreatedResponse(BaseModel):
    success: bool = True
    booking: BookingDetail


class BookingListResponse(BaseModel):
    success: bool = True
    count: int
    bookings: list[BookingDetail]
