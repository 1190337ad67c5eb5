"""
Pydantic schemas for room booking request/response validation.
"""

from datetime import datetime

from app.schemas.base import CamelModel, DbId


class BookingCreate(CamelModel):
    room_id: DbId


class BookingResponse(CamelModel):
    id: int
    user_id: int
    room_id: int
    created_at: datetime
    updated_at: datetime
