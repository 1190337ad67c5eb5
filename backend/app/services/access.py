"""
Hotel access gating shared by the hotel and booking services.

Access needs the user's ticket to be PAID and of a hotel-inclusive type. The
hotel endpoints report a failed check as 404/402, booking endpoints as 403,
so callers pass the errors to raise.
"""

from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RequestError
from app.models import Ticket
from app.repositories import ticket_repository
from app.schemas.base import MAX_DB_ID


async def require_hotel_ticket(
    db: AsyncSession,
    user_id: int,
    missing: Callable[[], RequestError],
    denied: Callable[[], RequestError],
) -> Ticket:
    ticket = await ticket_repository.get_ticket_by_user(db, user_id)
    if not ticket:
        raise missing()
    if not ticket.grants_hotel:
        raise denied()
    return ticket


def parse_id(raw, invalid: Callable[[], RequestError]) -> int:
    """
    Integer id from a path or query value. Raises invalid() unless it is a
    whole number that fits a primary key (1..MAX_DB_ID).
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise invalid()
    if not 0 < value <= MAX_DB_ID:
        raise invalid()
    return value
