"""
AeroSky - Analytics API
"""
from fastapi import APIRouter

from aerosky.api.deps import CurrentUser, DbSession
from aerosky.schemas.analytics import AnalyticsResponse
from aerosky.services.analytics import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    current_user: CurrentUser,
    db: DbSession,
):
    """Overall and per-subject performance, rebuilt from full history."""
    return await AnalyticsService(db).build_analytics(current_user.id)
