"""
Authentication endpoints: sign-up and sign-in.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.user import UserCreate, UserResponse, UserLogin, SignInResponse
from app.services.auth_service import register_user, authenticate_user

users_router = APIRouter(prefix="/users", tags=["Users"])
router = APIRouter(prefix="/auth", tags=["Authentication"])


@users_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user account."""
    return await register_user(db, user_data)


@router.post("/sign-in", response_model=SignInResponse)
async def sign_in(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Authenticate and receive a bearer token backed by a session."""
    user, token = await authenticate_user(db, login_data)
    return SignInResponse(user=UserResponse.model_validate(user), token=token)
