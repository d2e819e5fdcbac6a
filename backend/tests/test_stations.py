"""
Tests for the station directory.
"""

import pytest
from httpx import AsyncClient

from trainbook.services.station_service import list_stations, FALLBACK_STATIONS


@pytest.mark.asyncio
async def test_list_stations_sorted_by_name(client: AsyncClient, stations):
    response = await client.get("/stations")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [s["name"] for s in data["stations"]] == [
        "Bengaluru (SBC)", "Hubballi (HUBL)", "Mysuru (MYS)",
    ]
    assert data["stations"][0] == {"id": 1, "name": "Bengaluru (SBC)", "code": "SBC"}


@pytest.mark.asyncio
async def test_empty_store_returns_fallback(db_session):
    result = await list_stations(db_session)
    assert result
    assert result == list(FALLBACK_STATIONS)


@pytest.mark.asyncio
async def test_empty_store_endpoint(client: AsyncClient):
    response = await client.get("/stations")
    assert response.status_code == 200
    codes = [s["code"] for s in response.json()["stations"]]
    assert codes == ["SBC", "MYS", "MAQ", "HUBL"]
