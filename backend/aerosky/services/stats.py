"""
AeroSky - Stats Service
Persists graded tests, keeps the user's running statistics and
accumulates practice counters.
"""
import logging
import uuid
from dataclasses import asdict
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from aerosky.models.practice import PracticeSession
from aerosky.models.test import TestResult
from aerosky.models.user import User
from aerosky.services.scoring import ScoredTest, rounded_mean

logger = logging.getLogger(__name__)

# Dialects offering a single-statement INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class StatsService:
    """Write side of test results and practice sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save_test_result(self, user_id: uuid.UUID, scored: ScoredTest) -> TestResult:
        """Store a graded test for a user."""
        result = TestResult(
            user_id=user_id,
            test_type=scored.test_type,
            score=scored.score,
            total_questions=scored.total_questions,
            correct_answers=scored.correct_answers,
            time_taken=scored.time_taken,
            completed_at=scored.completed_at,
            answers=[asdict(answer) for answer in scored.answers],
        )
        self.db.add(result)
        await self.db.flush()
        return result

    async def update_user_stats(self, user_id: uuid.UUID, score: int) -> int:
        """
        Count a new test towards the user's statistics.

        tests_taken and total_score are incremented, while average_score is
        recomputed from every stored result so rounding never accumulates.
        Returns the new average.
        """
        scores = (
            await self.db.execute(
                select(TestResult.score).where(TestResult.user_id == user_id)
            )
        ).scalars().all()
        average = rounded_mean(scores)

        await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(
                tests_taken=User.tests_taken + 1,
                total_score=User.total_score + score,
                average_score=average,
            )
        )
        return average

    async def record_practice(
        self,
        user_id: uuid.UUID,
        subject: str,
        questions_answered: int = 0,
        correct_answers: int = 0,
        time_spent: int = 0,
    ) -> None:
        """
        Add practice activity to the (user, subject) session, creating it if needed.

        Runs as one conditional upsert so concurrent updates cannot lose increments.
        """
        dialect = self.db.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Practice upsert not supported on {dialect}")

        stmt = insert(PracticeSession).values(
            id=uuid.uuid4(),
            user_id=user_id,
            subject=subject,
            questions_answered=questions_answered,
            correct_answers=correct_answers,
            time_spent=time_spent,
            last_practiced=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "subject"],
            set_={
                "questions_answered": PracticeSession.questions_answered + stmt.excluded.questions_answered,
                "correct_answers": PracticeSession.correct_answers + stmt.excluded.correct_answers,
                "time_spent": PracticeSession.time_spent + stmt.excluded.time_spent,
                "last_practiced": stmt.excluded.last_practiced,
            },
        )
        await self.db.execute(stmt)
        logger.debug("Practice recorded for user %s in %s", user_id, subject)

    async def get_practice_sessions(self, user_id: uuid.UUID) -> list[PracticeSession]:
        result = await self.db.execute(
            select(PracticeSession)
            .where(PracticeSession.user_id == user_id)
            .order_by(PracticeSession.subject)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def get_test_results(
        self, user_id: uuid.UUID, limit: int | None = None
    ) -> list[TestResult]:
        """User's test results, newest first."""
        query = (
            select(TestResult)
            .where(TestResult.user_id == user_id)
            .order_by(TestResult.completed_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())
