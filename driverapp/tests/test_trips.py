"""
Integration tests for trip creation, listing and acceptance.
"""

import pytest
from sqlalchemy import select

from driverapp.app.models.order_trip import OrderTrip
from driverapp.app.models.trip import Trip
from driverapp.app.models.trip_enums import TripStatus


@pytest.mark.asyncio
async def test_create_trip_uses_caller_identity(api, rider_token):
    response = await api.create_trip(rider_token, "Station", "Airport")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Trip created successfully"
    assert data["trip"]["start_location"] == "Station"
    assert data["trip"]["end_location"] == "Airport"
    assert data["trip"]["status"] == "pending"
    assert data["trip"]["user_id"] == 1


@pytest.mark.asyncio
async def test_create_trip_ignores_spoofed_user_id(client, api, rider_token, driver_token):
    response = await client.post(
        "/api/trips",
        json={"start_location": "A", "end_location": "B", "user_id": 2},
        headers=api.bearer(rider_token),
    )

    assert response.status_code == 200
    assert response.json()["trip"]["user_id"] == 1


@pytest.mark.asyncio
async def test_create_trip_requires_locations(client, api, rider_token):
    response = await client.post(
        "/api/trips", json={"start_location": "A"}, headers=api.bearer(rider_token)
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_my_trips_only_lists_own_trips(client, api, rider_token):
    created = (await api.create_trip(rider_token)).json()["trip"]

    await api.register("u2", "u2@x.com")
    other_token = await api.login("u2@x.com")
    await api.create_trip(other_token, "C", "D")

    mine = await client.get("/api/trips", headers=api.bearer(rider_token))
    assert mine.status_code == 200
    assert [t["id"] for t in mine.json()] == [created["id"]]
    assert mine.json()[0]["user_id"] == 1
    assert mine.json()[0]["status"] == "pending"

    theirs = await client.get("/api/trips", headers=api.bearer(other_token))
    assert created["id"] not in [t["id"] for t in theirs.json()]


@pytest.mark.asyncio
async def test_available_trips_lists_pending_from_everyone(client, api, rider_token, driver_token):
    rider_trip = (await api.create_trip(rider_token)).json()["trip"]
    driver_trip = (await api.create_trip(driver_token, "X", "Y")).json()["trip"]

    response = await client.get("/api/available-trips", headers=api.bearer(driver_token))

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [rider_trip["id"], driver_trip["id"]]


@pytest.mark.asyncio
async def test_accept_trip(client, api, db_session, rider_token, driver_token):
    trip = (await api.create_trip(rider_token)).json()["trip"]

    response = await client.post(
        "/api/accept-trip", json={"tripId": trip["id"]}, headers=api.bearer(driver_token)
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Trip accepted successfully"
    assert data["orderTrip"]["trip_id"] == trip["id"]
    assert data["orderTrip"]["driver_id"] == 2
    assert data["orderTrip"]["status"] == "accepted"

    stored = await db_session.get(Trip, trip["id"])
    assert stored.status == TripStatus.COMPLETED

    available = await client.get("/api/available-trips", headers=api.bearer(driver_token))
    assert available.json() == []


@pytest.mark.asyncio
async def test_accept_trip_twice_conflicts(client, api, db_session, rider_token, driver_token):
    trip = (await api.create_trip(rider_token)).json()["trip"]
    first = await client.post(
        "/api/accept-trip", json={"tripId": trip["id"]}, headers=api.bearer(driver_token)
    )

    await api.register("d2", "d2@x.com", role="driver")
    second_driver = await api.login("d2@x.com")
    second = await client.post(
        "/api/accept-trip", json={"tripId": trip["id"]}, headers=api.bearer(second_driver)
    )

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json() == {"error": "Trip already accepted"}

    result = await db_session.execute(select(OrderTrip).where(OrderTrip.trip_id == trip["id"]))
    order_trips = result.scalars().all()
    assert len(order_trips) == 1
    assert order_trips[0].driver_id == 2


@pytest.mark.asyncio
async def test_accept_missing_trip(client, api, db_session, driver_token):
    response = await client.post(
        "/api/accept-trip", json={"tripId": 999}, headers=api.bearer(driver_token)
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Trip not found"}

    result = await db_session.execute(select(OrderTrip))
    assert result.scalars().all() == []


@pytest.mark.asyncio
async def test_accept_trip_requires_trip_id(client, api, driver_token):
    response = await client.post("/api/accept-trip", json={}, headers=api.bearer(driver_token))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_end_to_end_booking(client, api):
    assert (await api.register("d1", "d1@x.com", role=2)).status_code == 200
    assert (await api.register("u1", "u1@x.com", role=1)).status_code == 200

    token_u = await api.login("u1@x.com")
    created = await api.create_trip(token_u, "A", "B")
    assert created.json()["trip"]["id"] == 1
    assert created.json()["trip"]["status"] == "pending"

    token_d = await api.login("d1@x.com")
    available = await client.get("/api/available-trips", headers=api.bearer(token_d))
    assert 1 in [t["id"] for t in available.json()]

    accepted = await client.post("/api/accept-trip", json={"tripId": 1}, headers=api.bearer(token_d))
    assert accepted.status_code == 200

    mine = await client.get("/api/trips", headers=api.bearer(token_u))
    assert mine.json()[0]["status"] == "completed"


@pytest.mark.asyncio
@pytest.mark.parametrize("trip_id", [0, -1, 2**31, 2**63])
async def test_accept_out_of_range_trip_id_is_not_found(client, api, db_session, driver_token, trip_id):
    response = await client.post(
        "/api/accept-trip", json={"tripId": trip_id}, headers=api.bearer(driver_token)
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Trip not found"}

    result = await db_session.execute(select(OrderTrip))
    assert result.scalars().all() == []
