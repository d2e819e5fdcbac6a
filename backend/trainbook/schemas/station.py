"""
Pydantic schemas for the station directory.
"""

from pydantic import BaseModel


class StationResponse(BaseModel):
    id: int
    name: str
    code: str

    model_config = {"from_attributes": True}


class StationListResponse(BaseModel):
    success: bool = True
    stations: list[StationResponse]
