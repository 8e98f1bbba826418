"""
AeroSky - Authentication Service
Business logic for user registration, login and token issuance
"""
import logging
import uuid

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aerosky.core.security import (
    create_access_token,
    get_password_hash,
    verify_password,
)
from aerosky.models.user import User
from aerosky.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Base authentication error."""
    pass


class UserExistsError(AuthenticationError):
    """Email or username already taken."""
    pass


class InvalidCredentialsError(AuthenticationError):
    """Invalid email or password."""
    pass


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_existing_user(self, email: str, username: str) -> User | None:
        """User already holding this email or username, if any."""
        result = await self.db.execute(
            select(User).where(or_(User.email == email, User.username == username))
        )
        return result.scalars().first()

    async def register_user(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        The unique constraints on email and username settle a registration
        that races past the existence check.

        Raises:
            UserExistsError: If the email or username is already registered
        """
        if await self.find_existing_user(user_data.email, user_data.username):
            raise UserExistsError("User already exists")

        user = User(
            username=user_data.username,
            email=user_data.email,
            hashed_password=get_password_hash(user_data.password),
            tests_taken=0,
            total_score=0,
            average_score=0,
        )

        self.db.add(user)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise UserExistsError("User already exists")
        await self.db.refresh(user)

        logger.info("User registered: %s", user.email)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        """
        Authenticate user with email and password.

        Raises:
            InvalidCredentialsError: If credentials are invalid
        """
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        user = result.scalar_one_or_none()

        if not user or not verify_password(password, user.hashed_password):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError("Invalid credentials")

        logger.info("User logged in: %s", email)
        return user

    def create_token(self, user: User) -> str:
        """Issue an access token identifying the user."""
        return create_access_token(subject=str(user.id))

    async def get_user_by_id(self, user_id: str | uuid.UUID) -> User | None:
        """Get user by ID, None for a malformed or unknown ID."""
        if isinstance(user_id, str):
            try:
                user_id = uuid.UUID(user_id)
            except ValueError:
                return None

        result = await self.db.execute(
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
