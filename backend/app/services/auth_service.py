"""
Authentication service handling user sign-up and sign-in.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import conflict, unauthorized
from app.core.logging import get_logger
from app.core.security import hash_password, verify_password, create_access_token
from app.models import User
from app.repositories import user_repository
from app.schemas.user import UserCreate, UserLogin

logger = get_logger(__name__)


async def register_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Register a new user with hashed password.
    Raises 409 if the email already exists.
    """
    existing = await user_repository.get_user_by_email(db, user_data.email)
    if existing:
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        raise conflict("Email already registered")

    user = await user_repository.create_user(db, user_data.email, hash_password(user_data.password))

    logger.info("user_registered", user_id=user.id, email=user.email)
    return user


async def authenticate_user(db: AsyncSession, login_data: UserLogin) -> tuple[User, str]:
    """
    Check credentials, issue a JWT and open a session holding it.
    Raises 401 if credentials are invalid.
    """
    user = await user_repository.get_user_by_email(db, login_data.email)

    if not user or not verify_password(login_data.password, user.password):
        logger.warning("login_failed", email=login_data.email)
        raise unauthorized("email or password are incorrect")

    token = create_access_token(data={"sub": str(user.id)})
    await user_repository.create_session(db, user.id, token)

    logger.info("user_signed_in", user_id=user.id)
    return user, token
