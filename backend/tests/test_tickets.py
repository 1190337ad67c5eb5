"""
Tests for ticket types and ticket reservation.
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from app.models import TICKET_PAID
from app.services import ticket_service


@pytest.mark.asyncio
async def test_list_ticket_types(client: AsyncClient, auth_headers, create_ticket_type):
    remote = await create_ticket_type(includes_hotel=False, is_remote=True, price=10000)
    hotel = await create_ticket_type(includes_hotel=True)

    response = await client.get("/tickets/types", headers=auth_headers)
    assert response.status_code == 200
    data = {t["id"]: t for t in response.json()}
    assert data[remote.id]["isRemote"] is True
    assert data[remote.id]["price"] == 10000
    assert data[hotel.id]["includesHotel"] is True


@pytest.mark.asyncio
async def test_list_ticket_types_empty(client: AsyncClient, auth_headers):
    response = await client.get("/tickets/types", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_ticket_types_failure_is_no_content(client: AsyncClient, auth_headers, monkeypatch):
    async def broken(db):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(ticket_service, "get_ticket_types", broken)

    response = await client.get("/tickets/types", headers=auth_headers)
    assert response.status_code == 204
    assert response.content == b""


@pytest.mark.asyncio
async def test_get_ticket_not_found(client: AsyncClient, auth_headers, enrollment):
    response = await client.get("/tickets", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_ticket(client: AsyncClient, auth_headers, hotel_ticket):
    response = await client.get("/tickets", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == hotel_ticket.id
    assert data["status"] == TICKET_PAID
    assert data["ticketType"]["includesHotel"] is True


@pytest.mark.asyncio
async def test_create_ticket(client: AsyncClient, auth_headers, enrollment, create_ticket_type):
    ticket_type = await create_ticket_type()

    response = await client.post("/tickets", json={"ticketTypeId": ticket_type.id}, headers=auth_headers)
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "RESERVED"
    assert data["enrollmentId"] == enrollment.id
    assert data["ticketType"]["id"] == ticket_type.id


@pytest.mark.asyncio
async def test_oldest_ticket_governs(client: AsyncClient, auth_headers, hotel_ticket, create_ticket_type):
    """Buying another ticket does not replace the one already held."""
    ticket_type = await create_ticket_type(includes_hotel=False)

    response = await client.post("/tickets", json={"ticketTypeId": ticket_type.id}, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["id"] == hotel_ticket.id


@pytest.mark.asyncio
async def test_create_ticket_without_enrollment(client: AsyncClient, auth_headers, create_ticket_type):
    ticket_type = await create_ticket_type()
    response = await client.post("/tickets", json={"ticketTypeId": ticket_type.id}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_ticket_unknown_type(client: AsyncClient, auth_headers, enrollment):
    response = await client.post("/tickets", json={"ticketTypeId": 99999}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_ticket_missing_type(client: AsyncClient, auth_headers, enrollment):
    response = await client.post("/tickets", json={}, headers=auth_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_ticket_type_id_out_of_range(client: AsyncClient, auth_headers, enrollment):
    response = await client.post(
        "/tickets", json={"ticketTypeId": 99999999999999999999}, headers=auth_headers
    )
    assert response.status_code == 400
