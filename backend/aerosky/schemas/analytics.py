"""
AeroSky - Analytics Schemas
"""
from aerosky.schemas.common import CamelModel
from aerosky.schemas.practice import PracticeSessionResponse
from aerosky.schemas.test import TestResultResponse
from aerosky.schemas.user import UserResponse


class SubjectStats(CamelModel):
    """Per-subject test and practice summary."""
    tests_count: int = 0
    average_score: int = 0
    practice_time: int = 0  # Minutes
    practice_questions: int = 0


class AnalyticsResponse(CamelModel):
    """Aggregate view over a user's full test and practice history."""
    total_tests: int = 0
    average_score: int = 0
    best_score: int = 0
    recent_tests: list[TestResultResponse] = []
    subject_wise_stats: dict[str, SubjectStats] = {}


class ProfileResponse(CamelModel):
    user: UserResponse
    recent_tests: list[TestResultResponse] = []
    practice_stats: list[PracticeSessionResponse] = []
