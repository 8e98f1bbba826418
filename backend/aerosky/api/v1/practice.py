"""
AeroSky - Practice Session API
"""
from fastapi import APIRouter

from aerosky.api.deps import CurrentUser, DbSession
from aerosky.schemas.common import MessageResponse
from aerosky.schemas.practice import PracticeSessionResponse, PracticeUpdateRequest
from aerosky.services.stats import StatsService

router = APIRouter(prefix="/practice", tags=["Practice"])


@router.post("", response_model=MessageResponse)
async def update_practice(
    request: PracticeUpdateRequest,
    current_user: CurrentUser,
    db: DbSession,
):
    """Add a finished practice round to the subject's running totals."""
    await StatsService(db).record_practice(
        user_id=current_user.id,
        subject=request.subject,
        questions_answered=request.questions_answered,
        correct_answers=request.correct_answers,
        time_spent=request.time_spent,
    )
    await db.commit()
    return MessageResponse(message="Practice session updated")


@router.get("", response_model=list[PracticeSessionResponse])
async def list_practice(
    current_user: CurrentUser,
    db: DbSession,
):
    """Practice totals for every subject the user has practiced."""
    sessions = await StatsService(db).get_practice_sessions(current_user.id)
    return [PracticeSessionResponse.model_validate(s) for s in sessions]
