"""
AeroSky - Test Schemas
Pydantic schemas for test submission and stored results
"""
import uuid
from datetime import datetime
from typing import Annotated

from pydantic import Field

from aerosky.schemas.common import CamelModel


class AnswerSubmission(CamelModel):
    """A single submitted answer."""
    question_id: int
    user_answer: str


class TestSubmitRequest(CamelModel):
    """Request to submit a completed test."""
    test_type: Annotated[str, Field(min_length=1, max_length=50)]
    answers: list[AnswerSubmission]
    time_taken: Annotated[int, Field(ge=0)]  # Seconds


class TestScore(CamelModel):
    """Score summary returned after submission."""
    score: int
    correct_answers: int
    total_questions: int
    time_taken: int
    percentage: int


class TestSubmitResponse(CamelModel):
    test_result: TestScore


class GradedAnswerResponse(CamelModel):
    question_id: int
    user_answer: str
    correct_answer: str
    is_correct: bool


class TestResultResponse(CamelModel):
    """A stored test result."""
    id: uuid.UUID
    user_id: uuid.UUID
    test_type: str
    score: int
    total_questions: int
    correct_answers: int
    time_taken: int
    completed_at: datetime
    answers: list[GradedAnswerResponse] = []
