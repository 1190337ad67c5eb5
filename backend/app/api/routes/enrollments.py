"""
Enrollment endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import get_current_user_id
from app.db.session import get_db
from app.schemas.enrollment import EnrollmentUpsert, EnrollmentResponse
from app.services import enrollment_service

router = APIRouter(prefix="/enrollments", tags=["Enrollments"])


@router.get("", response_model=EnrollmentResponse)
async def get_enrollment(
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    return await enrollment_service.get_enrollment(db, user_id)


@router.post("", response_model=EnrollmentResponse)
async def upsert_enrollment(
    enrollment_data: EnrollmentUpsert,
    user_id: int = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the authenticated user's enrollment."""
    return await enrollment_service.upsert_enrollment(db, user_id, enrollment_data)
