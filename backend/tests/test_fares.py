"""
Tests for fare resolution: direction fallback, class selection, rejections.
"""

from decimal import Decimal

import pytest
from httpx import AsyncClient

from trainbook.core.exceptions import InvalidInput, FareNotFound
from trainbook.models import Fare
from trainbook.services.fare_service import resolve_fare


@pytest.mark.asyncio
async def test_resolve_fare_forward(db_session, fare):
    """Stored direction returns the sleeper fare."""
    assert await resolve_fare(db_session, 1, 2, "sleeper") == Decimal("300")


@pytest.mark.asyncio
async def test_resolve_fare_reverse_direction(db_session, fare):
    """Missing (2, 1) row falls back to the stored (1, 2) row."""
    assert await resolve_fare(db_session, 2, 1, "sleeper") == Decimal("300")
    for travel_class in ("ac", "sleeper", "general"):
        forward = await resolve_fare(db_session, 1, 2, travel_class)
        reverse = await resolve_fare(db_session, 2, 1, travel_class)
        assert forward == reverse


@pytest.mark.asyncio
@pytest.mark.parametrize("travel_class", ["AC", "ac", "Ac"])
async def test_resolve_fare_premium_case_insensitive(db_session, fare, travel_class):
    assert await resolve_fare(db_session, 1, 2, travel_class) == Decimal("500")


@pytest.mark.asyncio
@pytest.mark.parametrize("travel_class", ["business", "passenger", "general", "SL"])
async def test_resolve_fare_unknown_class_uses_passenger_fare(db_session, fare, travel_class):
    """Anything other than "ac" or "sleeper" is charged the unreserved fare."""
    assert await resolve_fare(db_session, 1, 2, travel_class) == Decimal("100")


@pytest.mark.asyncio
async def test_forward_row_wins_over_reverse(db_session, fare):
    """When both directions are stored, the requested direction is used."""
    db_session.add(Fare(
        from_station_id=2,
        to_station_id=1,
        fare_ac=Decimal("550"),
        fare_sleeper=Decimal("330"),
        fare_passenger=Decimal("110"),
    ))
    await db_session.commit()

    assert await resolve_fare(db_session, 2, 1, "sleeper") == Decimal("330")
    assert await resolve_fare(db_session, 1, 2, "sleeper") == Decimal("300")


@pytest.mark.asyncio
async def test_resolve_fare_same_station(db_session, fare):
    with pytest.raises(InvalidInput):
        await resolve_fare(db_session, 1, 1, "ac")


@pytest.mark.asyncio
@pytest.mark.parametrize("args", [(None, 2, "ac"), (1, None, "ac"), (1, 2, None), (1, 2, "")])
async def test_resolve_fare_missing_parameters(db_session, fare, args):
    with pytest.raises(InvalidInput):
        await resolve_fare(db_session, *args)


@pytest.mark.asyncio
async def test_resolve_fare_no_route(db_session, fare):
    with pytest.raises(FareNotFound):
        await resolve_fare(db_session, 1, 3, "ac")


@pytest.mark.asyncio
async def test_resolve_fare_null_class_column(db_session, stations):
    """A row without a fare for the class counts as no fare."""
    db_session.add(Fare(from_station_id=1, to_station_id=3, fare_ac=None, fare_sleeper=Decimal("250")))
    await db_session.commit()

    assert await resolve_fare(db_session, 3, 1, "sleeper") == Decimal("250")
    with pytest.raises(FareNotFound):
        await resolve_fare(db_session, 1, 3, "ac")


@pytest.mark.asyncio
async def test_calculate_fare_endpoint(client: AsyncClient, fare):
    response = await client.post("/calculate-fare", json={
        "fromStationId": 2,
        "toStationId": 1,
        "reservationType": "AC",
    })
    assert response.status_code == 200
    assert response.json() == {"success": True, "amount": 500.0}


@pytest.mark.asyncio
async def test_calculate_fare_endpoint_not_found(client: AsyncClient, fare):
    response = await client.post("/calculate-fare", json={
        "fromStationId": 1,
        "toStationId": 3,
        "reservationType": "sleeper",
    })
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Fare not found for selected route"}


@pytest.mark.asyncio
async def test_calculate_fare_endpoint_same_station(client: AsyncClient, fare):
    response = await client.post("/calculate-fare", json={
        "fromStationId": 2,
        "toStationId": 2,
        "reservationType": "sleeper",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "From and To must be different"


@pytest.mark.asyncio
async def test_calculate_fare_endpoint_missing_parameters(client: AsyncClient, fare):
    response = await client.post("/calculate-fare", json={"fromStationId": 1})
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing parameters"}


@pytest.mark.asyncio
async def test_calculate_fare_endpoint_blank_selection(client: AsyncClient, fare):
    """Unselected dropdowns arrive as empty strings and count as missing."""
    response = await client.post("/calculate-fare", json={
        "fromStationId": "",
        "toStationId": "2",
        "reservationType": "ac",
    })
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing parameters"}
