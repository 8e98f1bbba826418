"""
AeroSky - Authentication API Routes
Endpoints for registration, login and the user's profile
"""
from fastapi import APIRouter, HTTPException, status

from aerosky.api.deps import CurrentUser, DbSession
from aerosky.schemas.analytics import ProfileResponse
from aerosky.schemas.practice import PracticeSessionResponse
from aerosky.schemas.test import TestResultResponse
from aerosky.schemas.user import (
    AuthResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)
from aerosky.services.analytics import RECENT_TESTS_LIMIT
from aerosky.services.auth import (
    AuthService,
    InvalidCredentialsError,
    UserExistsError,
)
from aerosky.services.stats import StatsService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    user_data: UserCreate,
    db: DbSession,
) -> AuthResponse:
    """Register a new user account and sign it in."""
    auth_service = AuthService(db)
    
    try:
        user = await auth_service.register_user(user_data)
    except UserExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    await db.commit()
    
    return AuthResponse(
        token=auth_service.create_token(user),
        user=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Authenticate user",
)
async def login(
    credentials: UserLogin,
    db: DbSession,
) -> AuthResponse:
    """Authenticate user and return a bearer token."""
    auth_service = AuthService(db)
    
    try:
        user = await auth_service.authenticate(
            email=credentials.email,
            password=credentials.password,
        )
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    return AuthResponse(
        token=auth_service.create_token(user),
        user=UserResponse.model_validate(user),
    )


@router.get(
    "/profile",
    response_model=ProfileResponse,
    summary="Get current user profile",
)
async def get_profile(
    current_user: CurrentUser,
    db: DbSession,
) -> ProfileResponse:
    """Current user with recent tests and practice totals."""
    stats = StatsService(db)
    recent = await stats.get_test_results(current_user.id, limit=RECENT_TESTS_LIMIT)
    sessions = await stats.get_practice_sessions(current_user.id)
    
    return ProfileResponse(
        user=UserResponse.model_validate(current_user),
        recent_tests=[TestResultResponse.model_validate(r) for r in recent],
        practice_stats=[PracticeSessionResponse.model_validate(s) for s in sessions],
    )
