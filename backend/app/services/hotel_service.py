"""
Hotel listing for attendees holding a paid, hotel-inclusive ticket.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import bad_request, not_found, payment_required
from app.core.logging import get_logger
from app.models import Hotel
from app.repositories import hotel_repository
from app.schemas.hotel import HotelResponse
from app.services import cache_service
from app.services.access import parse_id, require_hotel_ticket

logger = get_logger(__name__)


async def _require_access(db: AsyncSession, user_id: int) -> None:
    await require_hotel_ticket(
        db,
        user_id,
        missing=lambda: not_found("ticket not found"),
        denied=lambda: payment_required("Payment required"),
    )


async def get_hotels(db: AsyncSession, user_id: int) -> list:
    await _require_access(db, user_id)

    cached = await cache_service.get_cached_catalog(cache_service.HOTELS_KEY)
    if cached is not None:
        return cached

    hotels = await hotel_repository.get_hotels(db)
    data = [HotelResponse.model_validate(h).model_dump(mode="json") for h in hotels]
    await cache_service.set_cached_catalog(cache_service.HOTELS_KEY, data)
    return data


async def get_hotel_rooms(db: AsyncSession, user_id: int, hotel_id) -> Hotel:
    hotel_id = parse_id(hotel_id, lambda: bad_request("invalid hotel id"))
    await _require_access(db, user_id)

    hotel = await hotel_repository.get_hotel_with_rooms(db, hotel_id)
    if not hotel:
        raise not_found("hotel not found")

    logger.debug("hotel_rooms_listed", hotel_id=hotel_id, rooms=len(hotel.rooms))
    return hotel
