"""
Payment lookup and processing endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_current_user_id
from app.db.session import get_db
from app.schemas.payment import PaymentProcess, PaymentResponse
from app.services import payment_service

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.get("", response_model=PaymentResponse)
async def get_payment(
    ticket_id: Optional[str] = Query(None, alias="ticketId"),
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await payment_service.get_payment(db, user_id, ticket_id)


@router.post("/process", response_model=PaymentResponse)
async def process_payment(
    payment_data: PaymentProcess,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Pay for a reserved ticket. Marks the ticket PAID in the same transaction."""
    return await payment_service.process_payment(db, user_id, payment_data)
