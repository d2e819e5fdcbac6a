"""
Fare calculation endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.db.session import get_db
from trainbook.schemas.fare import FareRequest, FareResponse
from trainbook.services.fare_service import resolve_fare

router = APIRouter(tags=["Fares"])


@router.post("/calculate-fare", response_model=FareResponse)
async def calculate_fare(fare_request: FareRequest, db: AsyncSession = Depends(get_db)):
    """
    Price a journey for a reservation type ("ac", "sleeper", anything else
    is charged the passenger fare). Works in either direction.
    """
    amount = await resolve_fare(
        db,
        fare_request.from_station_id,
        fare_request.to_station_id,
        fare_request.reservation_type,
    )
    return FareResponse(amount=float(amount))
