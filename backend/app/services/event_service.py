"""
The public event record, served from the catalog cache when available.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import not_found
from app.repositories import event_repository
from app.schemas.event import EventResponse
from app.services import cache_service


async def get_first_event(db: AsyncSession) -> dict:
    cached = await cache_service.get_cached_catalog(cache_service.EVENT_KEY)
    if cached is not None:
        return cached

    event = await event_repository.get_first_event(db)
    if not event:
        raise not_found("event not found")

    data = EventResponse.model_validate(event).model_dump(mode="json")
    await cache_service.set_cached_catalog(cache_service.EVENT_KEY, data)
    return data
