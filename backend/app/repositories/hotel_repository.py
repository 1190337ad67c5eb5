"""
Hotel and room queries.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Hotel, Room


async def get_hotels(db: AsyncSession) -> list[Hotel]:
    result = await db.execute(select(Hotel).order_by(Hotel.id))
    return list(result.scalars().all())


async def get_hotel_with_rooms(db: AsyncSession, hotel_id: int) -> Optional[Hotel]:
    # hotel_id is the primary key, so at most one row
    result = await db.execute(
        select(Hotel)
        .where(Hotel.id == hotel_id)
        .options(selectinload(Hotel.rooms))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_room(db: AsyncSession, room_id: int) -> Optional[Room]:
    return await db.get(Room, room_id)
