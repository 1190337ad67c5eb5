"""
Booking queries and writes.

Insert and room reassignment are separate operations; callers decide which
one applies after validating the booking id.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Booking


async def get_bookings_by_user(db: AsyncSession, user_id: int) -> list[Booking]:
    result = await db.execute(
        select(Booking).where(Booking.user_id == user_id).order_by(Booking.id)
    )
    return list(result.scalars().all())


async def get_booking_for_user(db: AsyncSession, user_id: int, booking_id: int) -> Optional[Booking]:
    result = await db.execute(
        select(Booking).where(Booking.id == booking_id, Booking.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def get_booking_by_room(db: AsyncSession, room_id: int) -> Optional[Booking]:
    # uq_booking_room guarantees at most one row
    result = await db.execute(select(Booking).where(Booking.room_id == room_id))
    return result.scalar_one_or_none()


async def create_booking(db: AsyncSession, user_id: int, room_id: int) -> Booking:
    booking = Booking(user_id=user_id, room_id=room_id)
    db.add(booking)
    await db.flush()
    await db.refresh(booking)
    return booking


async def update_booking_room(db: AsyncSession, booking: Booking, room_id: int) -> Booking:
    booking.room_id = room_id
    await db.flush()
    await db.refresh(booking)
    return booking
