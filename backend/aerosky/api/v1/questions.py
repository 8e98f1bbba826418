"""
AeroSky - Questions API
Serves the static question bank by subject
"""
import logging

from fastapi import APIRouter

from aerosky.api.deps import Bank, CurrentUser
from aerosky.schemas.question import QuestionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get("/{subject}", response_model=list[QuestionResponse])
async def get_questions(
    subject: str,
    bank: Bank,
    current_user: CurrentUser,
):
    """
    Questions for a subject, for both tests and practice.
    An unknown subject returns an empty list.
    """
    questions = bank.questions_for(subject)
    logger.info("Serving %d questions for %s", len(questions), subject)
    return [QuestionResponse.from_question(q) for q in questions]
