"""
Pydantic schemas for user-related request/response validation.

Emails are plain strings: the services decide whether a login matches or a
registration is a duplicate.
"""

from typing import Optional

from pydantic import BaseModel

from trainbook.schemas.common import RequestModel


class UserCreate(RequestModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(RequestModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    success: bool
    user: Optional[UserResponse] = None
    message: Optional[str] = None
