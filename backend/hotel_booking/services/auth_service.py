"""
Authentication service handling user registration and login.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.models.user import User, Session
from hotel_booking.schemas.user import UserCreate, UserLogin
from hotel_booking.core.errors import ConflictError, UnauthorizedError
from hotel_booking.core.security import hash_password, verify_password, create_access_token
from hotel_booking.core.logging import get_logger

logger = get_logger(__name__)


async def register_user(db: AsyncSession, user_data: UserCreate) -> User:
    """
    Register a new user with hashed password.
    Raises ConflictError if the email already exists.
    """
    result = await db.execute(select(User).where(User.email == user_data.email))
    if result.scalar_one_or_none():
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        raise ConflictError("Email already registered")

    user = User(
        email=user_data.email,
        hashed_password=hash_password(user_data.password),
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("user_registered", user_id=user.id, email=user.email)
    return user


async def authenticate_user(db: AsyncSession, login_data: UserLogin) -> str:
    """
    Authenticate user, open a session and return its JWT access token.
    Raises UnauthorizedError if credentials are invalid.
    """
    result = await db.execute(select(User).where(User.email == login_data.email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(login_data.password, user.hashed_password):
        logger.warning("login_failed", email=login_data.email)
        raise UnauthorizedError("Invalid email or password")

    token = create_access_token(data={"sub": str(user.id)})
    db.add(Session(user_id=user.id, token=token))
    await db.flush()

    logger.info("user_logged_in", user_id=user.id)
    return token
