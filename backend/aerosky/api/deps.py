"""
AeroSky - API Dependencies
FastAPI dependencies for authentication and shared resources
"""
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from aerosky.core.database import get_db
from aerosky.core.question_bank import QuestionBank, get_question_bank
from aerosky.core.security import verify_token
from aerosky.models.user import User
from aerosky.services.auth import AuthService

# Missing credentials are reported by get_current_user, not by the scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """
    Get current authenticated user from the bearer token.
    
    Raises:
        HTTPException: 401 without a token, 403 for an invalid or expired
            token or one whose user no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    
    user_id = verify_token(credentials.credentials)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    
    user = await AuthService(db).get_user_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )
    
    return user


# Type aliases for common dependencies
CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
Bank = Annotated[QuestionBank, Depends(get_question_bank)]
