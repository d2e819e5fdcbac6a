"""
Pydantic schemas for fare calculation.
"""

from typing import Optional

from pydantic import BaseModel

from trainbook.schemas.common import CamelRequest


class FareRequest(CamelRequest):
    from_station_id: Optional[int] = None
    to_station_id: Optional[int] = None
    reservation_type: Optional[str] = None


class FareResponse(BaseModel):
    success: bool = True
    amount: float
