"""
Pydantic schemas for ticket types and tickets.
"""

from datetime import datetime
from typing import Literal

from app.schemas.base import CamelModel, DbId


class TicketCreate(CamelModel):
    ticket_type_id: DbId


class TicketTypeResponse(CamelModel):
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: datetime
    updated_at: datetime


class TicketResponse(CamelModel):
    id: int
    status: Literal["RESERVED", "PAID"]
    ticket_type_id: int
    enrollment_id: int
    ticket_type: TicketTypeResponse
    created_at: datetime
    updated_at: datetime
