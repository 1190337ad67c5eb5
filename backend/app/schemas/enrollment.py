"""
Pydantic schemas for enrollment registration.
"""

from datetime import date, datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class EnrollmentUpsert(CamelModel):
    name: str = Field(..., min_length=3, max_length=255)
    cpf: str = Field(..., pattern=r"^\d{11}$")
    birthday: date
    phone: str = Field(..., pattern=r"^\d{10,11}$")

    @field_validator("birthday")
    @classmethod
    def birthday_in_past(cls, value: date) -> date:
        if value >= date.today():
            raise ValueError("birthday must be in the past")
        return value


class EnrollmentResponse(CamelModel):
    id: int
    user_id: int
    name: str
    cpf: str
    birthday: date
    phone: str
    created_at: datetime
    updated_at: datetime
