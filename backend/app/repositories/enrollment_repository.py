from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Enrollment


async def get_enrollment_by_user(db: AsyncSession, user_id: int) -> Optional[Enrollment]:
    result = await db.execute(select(Enrollment).where(Enrollment.user_id == user_id))
    return result.scalar_one_or_none()


async def get_enrollment_by_cpf(db: AsyncSession, cpf: str) -> Optional[Enrollment]:
    result = await db.execute(select(Enrollment).where(Enrollment.cpf == cpf))
    return result.scalar_one_or_none()


async def save_enrollment(db: AsyncSession, enrollment: Enrollment) -> Enrollment:
    db.add(enrollment)
    await db.flush()
    await db.refresh(enrollment)
    return enrollment
