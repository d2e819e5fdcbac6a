"""
Authentication endpoints: register and login.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trainbook.db.session import get_db
from trainbook.schemas.common import MessageResponse
from trainbook.schemas.user import UserCreate, UserLogin, UserResponse, LoginResponse
from trainbook.services.auth_service import register_user, authenticate_user

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=MessageResponse)
async def register(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user account."""
    await register_user(db, user_data.name, user_data.email, user_data.password)
    return MessageResponse(success=True, message="Registration successful")


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(login_data: UserLogin, db: AsyncSession = Depends(get_db)):
    """Check credentials and return the user's public profile."""
    user = await authenticate_user(db, login_data.email, login_data.password)
    if user is None:
        return LoginResponse(success=False, message="Invalid email or password")
    return LoginResponse(success=True, user=UserResponse.model_validate(user))
