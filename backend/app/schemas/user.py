"""
Pydantic schemas for sign-up and sign-in.
"""

from datetime import datetime
from pydantic import EmailStr, Field

from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(CamelModel):
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    id: int
    email: str
    created_at: datetime


class SignInResponse(CamelModel):
    user: UserResponse
    token: str
