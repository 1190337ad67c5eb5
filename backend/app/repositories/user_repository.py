from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Session, User


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(db: AsyncSession, email: str, hashed_password: str) -> User:
    user = User(email=email, password=hashed_password)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def create_session(db: AsyncSession, user_id: int, token: str) -> Session:
    session = Session(user_id=user_id, token=token)
    db.add(session)
    await db.flush()
    return session


async def get_session_by_token(db: AsyncSession, token: str) -> Optional[Session]:
    result = await db.execute(select(Session).where(Session.token == token))
    return result.scalar_one_or_none()
