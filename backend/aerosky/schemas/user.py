"""
AeroSky - User Schemas
Pydantic schemas for registration, login and profile responses
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import EmailStr, Field

from aerosky.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Schema for user registration."""
    username: Annotated[str, Field(min_length=3, max_length=50)]
    email: EmailStr
    password: Annotated[str, Field(min_length=6, max_length=128)]


class UserLogin(CamelModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserResponse(CamelModel):
    """Public user data. Never includes the password hash."""
    id: uuid.UUID
    username: str
    email: str
    created_at: datetime | None = None
    tests_taken: int = 0
    total_score: int = 0
    average_score: int = 0


class AuthResponse(CamelModel):
    """Token issued on registration or login."""
    token: str
    token_type: str = "bearer"
    user: UserResponse
