"""
Pydantic schemas for payment processing.

Card data is validated here before the service runs; only the issuer and
the last four digits of the number are ever stored.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from app.schemas.base import CamelModel, DbId


class CardData(CamelModel):
    issuer: Literal["VISA", "MASTERCARD"]
    number: int = Field(..., ge=1000)
    name: str = Field(..., min_length=1, max_length=255)
    expiration_date: str = Field(..., pattern=r"^\d{2}[-/]\d{2}$")
    cvv: int = Field(..., ge=1, le=999)


class PaymentProcess(CamelModel):
    ticket_id: DbId
    card_data: CardData


class PaymentResponse(CamelModel):
    id: int
    ticket_id: int
    value: int
    card_issuer: str
    card_last_digits: str
    created_at: datetime
    updated_at: datetime
