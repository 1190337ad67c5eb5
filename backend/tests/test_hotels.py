"""
Tests for hotel listing and access gating.
"""

import pytest
from httpx import AsyncClient

from app.models import TICKET_PAID, TICKET_RESERVED


@pytest.mark.asyncio
async def test_list_hotels(client: AsyncClient, auth_headers, hotel_ticket, create_hotel_with_rooms):
    hotel, _ = await create_hotel_with_rooms()

    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == hotel.id
    assert data[0]["image"] == hotel.image
    assert "rooms" not in data[0]


@pytest.mark.asyncio
async def test_list_hotels_without_enrollment(client: AsyncClient, auth_headers):
    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_hotels_without_ticket(client: AsyncClient, auth_headers, enrollment):
    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_hotels_unpaid_ticket(client: AsyncClient, auth_headers, enrollment, create_ticket_type, create_ticket):
    ticket_type = await create_ticket_type(includes_hotel=True)
    await create_ticket(enrollment, ticket_type, status=TICKET_RESERVED)

    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 402


@pytest.mark.asyncio
@pytest.mark.parametrize("is_remote", [True, False])
async def test_list_hotels_ticket_without_hotel(
    client: AsyncClient, auth_headers, enrollment, create_ticket_type, create_ticket, is_remote,
):
    ticket_type = await create_ticket_type(includes_hotel=False, is_remote=is_remote)
    await create_ticket(enrollment, ticket_type, status=TICKET_PAID)

    response = await client.get("/hotels", headers=auth_headers)
    assert response.status_code == 402


@pytest.mark.asyncio
async def test_hotel_rooms(client: AsyncClient, auth_headers, hotel_ticket, create_hotel_with_rooms):
    hotel, rooms = await create_hotel_with_rooms()

    response = await client.get(f"/hotels/{hotel.id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == hotel.id
    assert [r["id"] for r in data["rooms"]] == [r.id for r in rooms]
    assert data["rooms"][0]["hotelId"] == hotel.id
    assert data["rooms"][1]["capacity"] == 3


@pytest.mark.asyncio
async def test_hotel_rooms_not_found(client: AsyncClient, auth_headers, hotel_ticket):
    response = await client.get("/hotels/99999", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("hotel_id", ["abc", "12abc", "1.5"])
async def test_hotel_rooms_invalid_id(client: AsyncClient, auth_headers, hotel_ticket, hotel_id):
    """Only whole decimal numbers are ids; no prefix parsing."""
    response = await client.get(f"/hotels/{hotel_id}", headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_hotel_rooms_unpaid_ticket(
    client: AsyncClient, auth_headers, enrollment, create_ticket_type, create_ticket, create_hotel_with_rooms,
):
    hotel, _ = await create_hotel_with_rooms()
    ticket_type = await create_ticket_type(includes_hotel=True)
    await create_ticket(enrollment, ticket_type, status=TICKET_RESERVED)

    response = await client.get(f"/hotels/{hotel.id}", headers=auth_headers)
    assert response.status_code == 402


@pytest.mark.asyncio
@pytest.mark.parametrize("hotel_id", ["99999999999999999999", "2147483648", "0", "-3"])
async def test_hotel_rooms_id_out_of_range(client: AsyncClient, auth_headers, hotel_ticket, hotel_id):
    """Ids that cannot be a primary key are rejected before any query."""
    response = await client.get(f"/hotels/{hotel_id}", headers=auth_headers)
    assert response.status_code == 400
