"""
Room booking endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.booking import BookingCreate, BookingResponse
from app.services import booking_service
from app.core.security import get_current_user_id

router = APIRouter(prefix="/booking", tags=["Booking"])


@router.get("", response_model=list[BookingResponse])
async def list_user_bookings(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Get all bookings for the authenticated user."""
    return await booking_service.get_booking(db, user_id)


@router.post("", response_model=BookingResponse)
async def create_booking(
    booking_data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """
    Book a room.

    Requires a paid hotel-inclusive ticket. A room already held by any
    booking is refused with 403, including when two requests race for it.
    """
    return await booking_service.create_booking(db, user_id, booking_data.room_id)


@router.put("/{booking_id}", response_model=BookingResponse)
async def move_booking(
    booking_id: str,
    booking_data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Move one of the user's bookings to another free room."""
    return await booking_service.update_booking(db, user_id, booking_data.room_id, booking_id)
