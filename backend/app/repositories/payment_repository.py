from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Enrollment, Payment, Ticket


async def get_payment(db: AsyncSession, user_id: int, ticket_id: int) -> Optional[Payment]:
    """The payment of a ticket, restricted to tickets owned by the user's enrollment."""
    result = await db.execute(
        select(Payment)
        .join(Ticket, Payment.ticket_id == Ticket.id)
        .join(Enrollment, Ticket.enrollment_id == Enrollment.id)
        .where(Payment.ticket_id == ticket_id, Enrollment.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def create_payment(
    db: AsyncSession,
    ticket_id: int,
    value: int,
    card_issuer: str,
    card_last_digits: str,
) -> Payment:
    payment = Payment(
        ticket_id=ticket_id,
        value=value,
        card_issuer=card_issuer,
        card_last_digits=card_last_digits,
    )
    db.add(payment)
    await db.flush()
    await db.refresh(payment)
    return payment
