"""
Ticket type catalog and ticket purchase endpoints.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import RequestError
from app.core.logging import get_logger
from app.core.security import get_current_user_id
from app.db.session import get_db
from app.schemas.ticket import TicketCreate, TicketResponse, TicketTypeResponse
from app.services import ticket_service

logger = get_logger(__name__)
router = APIRouter(prefix="/tickets", tags=["Tickets"])


@router.get(
    "/types",
    response_model=list[TicketTypeResponse],
    responses={204: {"description": "Ticket types could not be loaded"}},
)
async def list_ticket_types(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """All ticket types. Any failure yields an empty 204 instead of an error."""
    try:
        return await ticket_service.get_ticket_types(db)
    except (RequestError, SQLAlchemyError) as e:
        logger.error("ticket_types_unavailable", error=str(e))
        await db.rollback()
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=TicketResponse)
async def get_user_ticket(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await ticket_service.get_ticket(db, user_id)


@router.post("", response_model=TicketResponse, status_code=status.HTTP_201_CREATED)
async def create_ticket(
    ticket_data: TicketCreate,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Reserve a ticket, then answer with the user's ticket as GET /tickets would."""
    await ticket_service.create_ticket(db, user_id, ticket_data.ticket_type_id)
    return await ticket_service.get_ticket(db, user_id)
