"""
Authentication service handling user registration and login.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.models.user import User
from trainbook.core.security import hash_password, verify_password
from trainbook.core.exceptions import MissingFields, DuplicateEmail, StoreUnavailable
from trainbook.core.logging import get_logger
from trainbook.core.metrics import record_registration, record_login, record_db_operation

logger = get_logger(__name__)


async def register_user(
    db: AsyncSession,
    name: Optional[str],
    email: Optional[str],
    password: Optional[str],
) -> None:
    """
    Register a new user with a hashed password.
    The unique index on email decides duplicates; a violation raises
    DuplicateEmail rather than a server error.
    """
    if not name or not email or not password:
        raise MissingFields("Missing registration fields")

    user = User(name=name, email=email, password_hash=hash_password(password))
    try:
        db.add(user)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        record_registration("duplicate")
        logger.warning("registration_failed", reason="email_exists", email=email)
        raise DuplicateEmail("Email already exists")
    except SQLAlchemyError as e:
        await db.rollback()
        record_db_operation("error")
        logger.error("registration_error", email=email, error=str(e))
        raise StoreUnavailable("Could not register user") from e

    record_db_operation("write")
    record_registration("created")
    logger.info("user_registered", user_id=user.id, email=email)


async def authenticate_user(
    db: AsyncSession,
    email: Optional[str],
    password: Optional[str],
) -> Optional[User]:
    """
    Return the user whose email and password match, or None.
    A failed match is a normal outcome, not an error.
    """
    if not email or not password:
        raise MissingFields("Missing login fields")

    try:
        result = await db.execute(select(User).where(User.email == email).limit(1))
        user = result.scalar_one_or_none()
    except SQLAlchemyError as e:
        record_db_operation("error")
        logger.error("login_error", email=email, error=str(e))
        raise StoreUnavailable("Could not login") from e

    record_db_operation("read")

    if user is None or not verify_password(password, user.password_hash):
        record_login(False)
        logger.warning("login_failed", email=email)
        return None

    record_login(True)
    logger.info("user_logged_in", user_id=user.id)
    return user
