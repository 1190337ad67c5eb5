"""
Ticket payment lookup and processing.

Processing writes the Payment row and flips the ticket to PAID in the same
request transaction; both land on commit or neither does. payments.ticket_id
is unique, so a concurrent second payment for one ticket fails at insert.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RequestError, bad_request, not_found, unauthorized
from app.core.logging import get_logger
from app.core.metrics import record_payment_attempt
from app.models import Payment, Ticket, TICKET_PAID
from app.repositories import enrollment_repository, payment_repository, ticket_repository
from app.schemas.payment import PaymentProcess
from app.services.access import parse_id

logger = get_logger(__name__)


async def _require_ticket_owner(db: AsyncSession, user_id: int, ticket: Ticket) -> None:
    enrollment = await enrollment_repository.get_enrollment_by_user(db, user_id)
    if not enrollment or enrollment.id != ticket.enrollment_id:
        raise unauthorized("user doesnt own given ticket")


async def get_payment(db: AsyncSession, user_id: int, ticket_id) -> Payment:
    ticket_id = parse_id(ticket_id, lambda: bad_request("invalid ticket id"))

    ticket = await ticket_repository.get_ticket(db, ticket_id)
    if not ticket:
        raise not_found("ticket not found")

    await _require_ticket_owner(db, user_id, ticket)

    payment = await payment_repository.get_payment(db, user_id, ticket_id)
    if not payment:
        raise unauthorized("no payment for given ticket")
    return payment


async def process_payment(db: AsyncSession, user_id: int, data: PaymentProcess) -> Payment:
    try:
        ticket = await ticket_repository.get_ticket(db, data.ticket_id)
        if not ticket:
            raise not_found("ticket not found")
        if ticket.status == TICKET_PAID:
            raise unauthorized("ticket ja pago")

        await _require_ticket_owner(db, user_id, ticket)
    except RequestError:
        record_payment_attempt("rejected")
        raise

    ticket_type = await ticket_repository.get_ticket_type(db, ticket.ticket_type_id)
    card_last_digits = str(data.card_data.number)[-4:]

    try:
        payment = await payment_repository.create_payment(
            db,
            ticket_id=ticket.id,
            value=ticket_type.price,
            card_issuer=data.card_data.issuer,
            card_last_digits=card_last_digits,
        )
    except IntegrityError:
        record_payment_attempt("conflict")
        logger.warning("payment_conflict", ticket_id=ticket.id, user_id=user_id)
        raise unauthorized("payment could not be registered")

    await ticket_repository.mark_ticket_paid(db, ticket)

    record_payment_attempt("success", payment.value)
    logger.info(
        "payment_processed",
        payment_id=payment.id,
        ticket_id=ticket.id,
        user_id=user_id,
        value=payment.value,
        issuer=payment.card_issuer,
    )
    return payment
