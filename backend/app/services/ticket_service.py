"""
Ticket type catalog and ticket purchase.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import not_found
from app.core.logging import get_logger
from app.models import Ticket
from app.repositories import enrollment_repository, ticket_repository
from app.schemas.ticket import TicketTypeResponse
from app.services import cache_service

logger = get_logger(__name__)


async def get_ticket_types(db: AsyncSession) -> list:
    """All ticket types. Served from the catalog cache when available."""
    cached = await cache_service.get_cached_catalog(cache_service.TICKET_TYPES_KEY)
    if cached is not None:
        return cached

    ticket_types = await ticket_repository.get_ticket_types(db)
    data = [TicketTypeResponse.model_validate(t).model_dump(mode="json") for t in ticket_types]
    await cache_service.set_cached_catalog(cache_service.TICKET_TYPES_KEY, data)
    return data


async def get_ticket(db: AsyncSession, user_id: int) -> Ticket:
    ticket = await ticket_repository.get_ticket_by_user(db, user_id)
    if not ticket:
        raise not_found("ticket not found")
    return ticket


async def create_ticket(db: AsyncSession, user_id: int, ticket_type_id: int) -> Ticket:
    """
    Reserve a ticket of the given type for the user's enrollment.
    A user may hold several tickets; no duplicate check is made.
    """
    enrollment = await enrollment_repository.get_enrollment_by_user(db, user_id)
    if not enrollment:
        raise not_found("user doesnt have enrollment yet")

    ticket_type = await ticket_repository.get_ticket_type(db, ticket_type_id)
    if not ticket_type:
        raise not_found("ticket type not found")

    ticket = await ticket_repository.create_ticket(db, enrollment.id, ticket_type.id)

    logger.info(
        "ticket_reserved",
        ticket_id=ticket.id,
        user_id=user_id,
        ticket_type_id=ticket_type.id,
    )
    return ticket
