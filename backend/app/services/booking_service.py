"""
Room booking service.

CONCURRENCY STRATEGY: Read Check + Unique Constraint
====================================================

Problem:
  Two attendees ask for the same room at the same moment.
  Both read "no booking holds room 7", both insert.
  Result: one room, two bookings.

Solution:
  bookings.room_id carries a UNIQUE constraint (uq_booking_room).

  1. Read: is there a booking for the room? -> 403 "already reserved"
  2. Write: INSERT (or UPDATE room_id on an existing booking)
  3. If the write violates uq_booking_room, another request won the race
     between 1 and 2 -> same 403 "already reserved"

  The read gives the common case a clean answer without touching the
  constraint; the constraint is what actually guarantees one booking per
  room. No row locks, no retries: the loser simply gets the 403.

Gating:
  Every write needs the user's ticket to be PAID and hotel-inclusive. Unlike
  the hotel listing endpoints, a failed check here is reported as 403.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RequestError, forbidden, not_found
from app.core.logging import get_logger
from app.core.metrics import record_booking_attempt
from app.models import Booking
from app.repositories import booking_repository, hotel_repository
from app.services.access import parse_id, require_hotel_ticket

logger = get_logger(__name__)


async def _require_booking_access(db: AsyncSession, user_id: int) -> None:
    await require_hotel_ticket(
        db,
        user_id,
        missing=lambda: forbidden("not found"),
        denied=lambda: forbidden("Payment required"),
    )


async def _require_free_room(db: AsyncSession, room_id: int) -> None:
    room = await hotel_repository.get_room(db, room_id)
    if not room:
        raise not_found("room not found")

    holder = await booking_repository.get_booking_by_room(db, room_id)
    if holder:
        raise forbidden("already reserved")


async def get_booking(db: AsyncSession, user_id: int) -> list[Booking]:
    bookings = await booking_repository.get_bookings_by_user(db, user_id)
    if not bookings:
        raise not_found("booking not found")
    return bookings


async def create_booking(db: AsyncSession, user_id: int, room_id: int) -> Booking:
    try:
        await _require_booking_access(db, user_id)
        await _require_free_room(db, room_id)
    except RequestError:
        record_booking_attempt("create", "rejected")
        raise

    try:
        booking = await booking_repository.create_booking(db, user_id, room_id)
    except IntegrityError:
        record_booking_attempt("create", "conflict")
        logger.warning("booking_conflict", user_id=user_id, room_id=room_id)
        raise forbidden("already reserved")

    record_booking_attempt("create", "success")
    logger.info(
        "booking_created",
        booking_id=booking.id,
        user_id=user_id,
        room_id=room_id,
    )
    return booking


async def update_booking(db: AsyncSession, user_id: int, room_id: int, booking_id) -> Booking:
    """Move the user's existing booking to another free room."""
    try:
        booking_id = parse_id(booking_id, lambda: forbidden("invalid booking id"))
        await _require_booking_access(db, user_id)
        await _require_free_room(db, room_id)

        booking = await booking_repository.get_booking_for_user(db, user_id, booking_id)
        if not booking:
            raise forbidden("not reserved yet")
    except RequestError:
        record_booking_attempt("update", "rejected")
        raise

    previous_room_id = booking.room_id
    try:
        booking = await booking_repository.update_booking_room(db, booking, room_id)
    except IntegrityError:
        record_booking_attempt("update", "conflict")
        logger.warning("booking_conflict", user_id=user_id, room_id=room_id, booking_id=booking_id)
        raise forbidden("already reserved")

    record_booking_attempt("update", "success")
    logger.info(
        "booking_moved",
        booking_id=booking.id,
        user_id=user_id,
        from_room_id=previous_room_id,
        to_room_id=room_id,
    )
    return booking
