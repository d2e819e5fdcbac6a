"""
Station directory endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.db.session import get_db
from trainbook.schemas.station import StationListResponse
from trainbook.services.station_service import list_stations

router = APIRouter(tags=["Stations"])


@router.get("/stations", response_model=StationListResponse)
async def list_stations_endpoint(db: AsyncSession = Depends(get_db)):
    """List stations alphabetically. Never returns an empty list."""
    stations = await list_stations(db)
    return StationListResponse(stations=stations)
