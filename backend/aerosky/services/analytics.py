"""
AeroSky - Analytics Service
Read-only aggregation of a user's test results and practice sessions
"""
import uuid
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from aerosky.core.question_bank import SUBJECTS
from aerosky.models.practice import PracticeSession
from aerosky.models.test import TestResult
from aerosky.schemas.analytics import AnalyticsResponse, SubjectStats
from aerosky.schemas.test import TestResultResponse
from aerosky.services.scoring import round_half_up, rounded_mean
from aerosky.services.stats import StatsService


RECENT_TESTS_LIMIT = 5


def summarize_subject(
    subject: str,
    results: Sequence[TestResult],
    sessions: Sequence[PracticeSession],
) -> SubjectStats:
    """Test and practice summary for one subject."""
    scores = [r.score for r in results if r.test_type == subject]
    practice = next((s for s in sessions if s.subject == subject), None)

    return SubjectStats(
        tests_count=len(scores),
        average_score=rounded_mean(scores),
        practice_time=round_half_up(practice.time_spent, 60) if practice else 0,
        practice_questions=practice.questions_answered if practice else 0,
    )


def compute_analytics(
    results: Sequence[TestResult],
    sessions: Sequence[PracticeSession],
) -> AnalyticsResponse:
    """
    Fold test results (newest first) and practice sessions into analytics.

    Every subject in SUBJECTS gets a bucket, even without any activity.
    """
    scores = [r.score for r in results]

    return AnalyticsResponse(
        total_tests=len(scores),
        average_score=rounded_mean(scores),
        best_score=max(scores, default=0),
        recent_tests=[
            TestResultResponse.model_validate(r) for r in results[:RECENT_TESTS_LIMIT]
        ],
        subject_wise_stats={
            subject: summarize_subject(subject, results, sessions)
            for subject in SUBJECTS
        },
    )


class AnalyticsService:
    """
    Builds analytics from raw history on every call.

    The cached averages on the user row are never trusted here.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.stats = StatsService(db)

    async def build_analytics(self, user_id: uuid.UUID) -> AnalyticsResponse:
        results = await self.stats.get_test_results(user_id)
        sessions = await self.stats.get_practice_sessions(user_id)
        return compute_analytics(results, sessions)
