"""
Public event endpoint. No authentication: the landing page reads it.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.event import EventResponse
from app.services import event_service

router = APIRouter(prefix="/event", tags=["Event"])


@router.get("", response_model=EventResponse)
async def get_event(db: AsyncSession = Depends(get_db)):
    return await event_service.get_first_event(db)
