"""
Tests for hotel endpoints and the ticket eligibility rule they share with booking.
"""

import pytest
from httpx import AsyncClient

from tests import factories


@pytest.mark.asyncio
async def test_list_hotels(client: AsyncClient, db_session, auth_headers, eligible_user, hotel):
    other = await factories.create_hotel(db_session, name="Beach Resort")

    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [h["id"] for h in data] == [hotel.id, other.id]
    assert set(data[0]) == {"id", "name", "image", "createdAt", "updatedAt"}


@pytest.mark.asyncio
async def test_get_hotel_with_rooms(client: AsyncClient, db_session, auth_headers, eligible_user, hotel):
    room = await factories.create_room(db_session, hotel, capacity=2, name="101")

    response = await client.get(f"/hotels/{hotel.id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == hotel.id
    assert data["Rooms"] == [{
        "id": room.id,
        "name": "101",
        "capacity": 2,
        "hotelId": hotel.id,
        "createdAt": data["Rooms"][0]["createdAt"],
        "updatedAt": data["Rooms"][0]["updatedAt"],
    }]


@pytest.mark.asyncio
async def test_get_hotel_not_found(client: AsyncClient, auth_headers, eligible_user):
    response = await client.get("/hotels/99999", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_hotels_without_enrollment(client: AsyncClient, auth_headers, hotel):
    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_hotels_without_ticket(client: AsyncClient, db_session, test_user, auth_headers, hotel):
    await factories.create_enrollment(db_session, test_user)

    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 402


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "is_remote, includes_hotel, paid",
    [
        (True, False, True),    # remote ticket
        (False, False, True),   # in-person without hotel
        (False, True, False),   # hotel ticket not paid yet
    ],
)
async def test_list_hotels_ineligible_ticket(
    client: AsyncClient, db_session, test_user, auth_headers, hotel, is_remote, includes_hotel, paid
):
    enrollment = await factories.create_enrollment(db_session, test_user)
    ticket_type = await factories.create_ticket_type(
        db_session, is_remote=is_remote, includes_hotel=includes_hotel
    )
    await factories.create_ticket(db_session, enrollment, ticket_type, paid=paid)

    response = await client.get(f"/hotels/{hotel.id}", headers=auth_headers)
    assert response.status_code == 402
