"""
Pydantic schemas for hotels and rooms.
"""

from datetime import datetime

from app.schemas.base import CamelModel


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class HotelResponse(CamelModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class HotelWithRoomsResponse(HotelResponse):
    rooms: list[RoomResponse]
