"""
Tests for the response envelope, error mapping, health and metrics.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not found"}


@pytest.mark.asyncio
async def test_malformed_payload(client: AsyncClient):
    response = await client.post("/calculate-fare", json={
        "fromStationId": "one",
        "toStationId": 2,
        "reservationType": "ac",
    })
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid request payload"}


@pytest.mark.asyncio
async def test_store_failure_hides_details(client: AsyncClient, db_session, monkeypatch):
    """Database errors surface as a generic 500 without internals."""

    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT ...", {}, Exception("connection refused"))

    monkeypatch.setattr(db_session, "execute", broken_execute)

    response = await client.get("/stations")
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Could not load stations"}


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    response = await client.get("/stations", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_health_without_database(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["database"] == "unavailable"
    assert data["status"] == "degraded"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient, fare):
    await client.post("/calculate-fare", json={
        "fromStationId": 2, "toStationId": 1, "reservationType": "sleeper",
    })
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'fare_lookups_total{resolution="reverse"}' in response.text
