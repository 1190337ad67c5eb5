"""
Ticket and ticket type queries.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Enrollment, Ticket, TicketType, TICKET_PAID, TICKET_RESERVED


async def get_ticket_types(db: AsyncSession) -> list[TicketType]:
    result = await db.execute(select(TicketType).order_by(TicketType.id))
    return list(result.scalars().all())


async def get_ticket_type(db: AsyncSession, ticket_type_id: int) -> Optional[TicketType]:
    return await db.get(TicketType, ticket_type_id)


async def get_ticket_by_user(db: AsyncSession, user_id: int) -> Optional[Ticket]:
    """
    The ticket that governs the user's access: the oldest ticket of the
    user's enrollment, with its type loaded. None if the user has no ticket.
    """
    result = await db.execute(
        select(Ticket)
        .join(Enrollment, Ticket.enrollment_id == Enrollment.id)
        .where(Enrollment.user_id == user_id)
        .options(selectinload(Ticket.ticket_type))
        .order_by(Ticket.id.asc())
        .limit(1)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_ticket(db: AsyncSession, ticket_id: int) -> Optional[Ticket]:
    return await db.get(Ticket, ticket_id)


async def create_ticket(db: AsyncSession, enrollment_id: int, ticket_type_id: int) -> Ticket:
    ticket = Ticket(
        enrollment_id=enrollment_id,
        ticket_type_id=ticket_type_id,
        status=TICKET_RESERVED,
    )
    db.add(ticket)
    await db.flush()
    await db.refresh(ticket)
    return ticket


async def mark_ticket_paid(db: AsyncSession, ticket: Ticket) -> Ticket:
    ticket.status = TICKET_PAID
    await db.flush()
    await db.refresh(ticket)
    return ticket
