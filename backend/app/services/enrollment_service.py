"""
Enrollment registration: the prerequisite for buying a ticket.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import conflict, not_found
from app.core.logging import get_logger
from app.models import Enrollment
from app.repositories import enrollment_repository
from app.schemas.enrollment import EnrollmentUpsert

logger = get_logger(__name__)


async def get_enrollment(db: AsyncSession, user_id: int) -> Enrollment:
    enrollment = await enrollment_repository.get_enrollment_by_user(db, user_id)
    if not enrollment:
        raise not_found("enrollment not found")
    return enrollment


async def upsert_enrollment(db: AsyncSession, user_id: int, data: EnrollmentUpsert) -> Enrollment:
    """Create the user's enrollment, or overwrite its fields if one exists."""
    holder = await enrollment_repository.get_enrollment_by_cpf(db, data.cpf)
    if holder and holder.user_id != user_id:
        raise conflict("cpf already enrolled")

    enrollment = await enrollment_repository.get_enrollment_by_user(db, user_id)
    created = enrollment is None
    if created:
        enrollment = Enrollment(user_id=user_id)

    enrollment.name = data.name
    enrollment.cpf = data.cpf
    enrollment.birthday = data.birthday
    enrollment.phone = data.phone
    enrollment = await enrollment_repository.save_enrollment(db, enrollment)

    logger.info(
        "enrollment_created" if created else "enrollment_updated",
        enrollment_id=enrollment.id,
        user_id=user_id,
    )
    return enrollment
