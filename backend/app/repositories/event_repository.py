from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Event


async def get_first_event(db: AsyncSession) -> Optional[Event]:
    result = await db.execute(select(Event).order_by(Event.id).limit(1))
    return result.scalar_one_or_none()
