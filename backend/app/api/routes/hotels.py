"""
Hotel listing endpoints, gated on a paid hotel-inclusive ticket.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_current_user_id
from app.db.session import get_db
from app.schemas.hotel import HotelResponse, HotelWithRoomsResponse
from app.services import hotel_service

router = APIRouter(prefix="/hotels", tags=["Hotels"])


@router.get("", response_model=list[HotelResponse])
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await hotel_service.get_hotels(db, user_id)


@router.get("/{hotel_id}", response_model=HotelWithRoomsResponse)
async def get_hotel_rooms(
    hotel_id: str,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """A hotel with its rooms. hotel_id is parsed by the service (400 if not numeric)."""
    return await hotel_service.get_hotel_rooms(db, user_id, hotel_id)
