"""
AeroSky - Test API
Grades submitted tests and records the result
"""
import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from aerosky.api.deps import Bank, CurrentUser, DbSession
from aerosky.schemas.test import TestScore, TestSubmitRequest, TestSubmitResponse
from aerosky.services.scoring import SubmittedAnswer, grade_submission
from aerosky.services.stats import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tests"])


@router.post("/submit-test", response_model=TestSubmitResponse)
async def submit_test(
    request: TestSubmitRequest,
    current_user: CurrentUser,
    db: DbSession,
    bank: Bank,
):
    """
    Submit test answers.
    Grades answers, stores the result and refreshes the user's statistics.
    """
    user_id = current_user.id
    
    # 1. Grade
    scored = grade_submission(
        test_type=request.test_type,
        answers=[
            SubmittedAnswer(question_id=a.question_id, user_answer=a.user_answer)
            for a in request.answers
        ],
        time_taken=request.time_taken,
        bank=bank,
    )
    
    # 2. Save result
    stats = StatsService(db)
    await stats.save_test_result(user_id, scored)
    await db.commit()
    
    # 3. Update user statistics. The stored result stays valid if this
    # fails; the average is rebuilt from history on the next submission.
    try:
        await stats.update_user_stats(user_id, scored.score)
        await db.commit()
    except SQLAlchemyError:
        logger.exception("User stats update failed for %s (non-critical)", user_id)
        await db.rollback()
    
    return TestSubmitResponse(
        test_result=TestScore(
            score=scored.score,
            correct_answers=scored.correct_answers,
            total_questions=scored.total_questions,
            time_taken=scored.time_taken,
            percentage=scored.score,
        )
    )
