"""
Pydantic schema for the public event record.
"""

from datetime import datetime

from app.schemas.base import CamelModel


class EventResponse(CamelModel):
    id: int
    title: str
    background_image_url: str
    logo_image_url: str
    starts_at: datetime
    ends_at: datetime
    created_at: datetime
    updated_at: datetime
