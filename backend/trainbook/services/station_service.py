"""
Station directory: read-only, alphabetical, never empty.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.models.station import Station
from trainbook.schemas.station import StationResponse
from trainbook.core.exceptions import StoreUnavailable
from trainbook.core.logging import get_logger
from trainbook.core.metrics import record_db_operation

logger = get_logger(__name__)

# Served when the stations table has no rows.
FALLBACK_STATIONS: tuple[StationResponse, ...] = (
    StationResponse(id=1, name="Bengaluru (SBC)", code="SBC"),
    StationResponse(id=2, name="Mysuru (MYS)", code="MYS"),
    StationResponse(id=3, name="Mangaluru (MAQ)", code="MAQ"),
    StationResponse(id=4, name="Hubballi (HUBL)", code="HUBL"),
)


async def list_stations(db: AsyncSession) -> list[StationResponse]:
    """Return all stations ordered by name, or the fallback list if there are none."""
    try:
        result = await db.execute(select(Station).order_by(Station.name.asc()))
        stations = list(result.scalars().all())
    except SQLAlchemyError as e:
        record_db_operation("error")
        logger.error("stations_load_failed", error=str(e))
        raise StoreUnavailable("Could not load stations") from e

    record_db_operation("read")

    if not stations:
        logger.warning("stations_empty_using_fallback", count=len(FALLBACK_STATIONS))
        return list(FALLBACK_STATIONS)

    return [StationResponse.model_validate(s) for s in stations]
