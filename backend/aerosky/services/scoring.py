"""
AeroSky - Scoring Engine
Grades a submitted test against the question bank. Pure computation:
persistence and user statistics are handled by the caller.
"""
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from aerosky.core.question_bank import Question, QuestionBank


def round_half_up(numerator: int, denominator: int = 1) -> int:
    """
    Round ``numerator / denominator`` to the nearest integer, ties away from zero.

    A zero denominator yields 0.
    """
    if denominator == 0:
        return 0
    value = Decimal(numerator) / Decimal(denominator)
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> int:
    """Integer percentage of ``part`` in ``whole``; 0 when ``whole`` is 0."""
    return round_half_up(100 * part, whole)


def rounded_mean(values: Sequence[int]) -> int:
    """Rounded mean of integer values; 0 for an empty sequence."""
    return round_half_up(sum(values), len(values))


@dataclass(frozen=True)
class SubmittedAnswer:
    question_id: int
    user_answer: str


@dataclass(frozen=True)
class GradedAnswer:
    question_id: int
    user_answer: str
    correct_answer: str
    is_correct: bool


@dataclass(frozen=True)
class ScoredTest:
    """Outcome of grading one submission, not yet owned by a user."""
    test_type: str
    score: int
    total_questions: int
    correct_answers: int
    time_taken: int
    completed_at: datetime
    answers: tuple[GradedAnswer, ...] = field(default_factory=tuple)


def _find_question(questions: Sequence[Question], question_id: int) -> Question | None:
    for question in questions:
        if question.id == question_id:
            return question
    return None


def grade_answer(questions: Sequence[Question], answer: SubmittedAnswer) -> GradedAnswer:
    """
    Grade one answer by exact, case-sensitive comparison.

    An answer to an unknown question is incorrect with an empty correct answer.
    """
    question = _find_question(questions, answer.question_id)
    if question is None:
        return GradedAnswer(
            question_id=answer.question_id,
            user_answer=answer.user_answer,
            correct_answer="",
            is_correct=False,
        )
    return GradedAnswer(
        question_id=answer.question_id,
        user_answer=answer.user_answer,
        correct_answer=question.correct_answer,
        is_correct=question.correct_answer == answer.user_answer,
    )


def grade_submission(
    test_type: str,
    answers: Iterable[SubmittedAnswer],
    time_taken: int,
    bank: QuestionBank,
    now: datetime | None = None,
) -> ScoredTest:
    """
    Grade a test submission.

    The score is the percentage of correct answers over the number of
    questions in the subject, so unanswered questions count against it.
    An unknown subject has no questions and scores 0. Repeated answers to
    the same question are each graded, but the score never exceeds 100.
    Graded answers keep the order in which they were submitted.
    """
    questions = bank.questions_for(test_type)
    graded = tuple(grade_answer(questions, answer) for answer in answers)
    correct = sum(1 for answer in graded if answer.is_correct)
    total = len(questions)

    return ScoredTest(
        test_type=test_type,
        score=min(percentage(correct, total), 100),
        total_questions=total,
        correct_answers=correct,
        time_taken=time_taken,
        completed_at=now or datetime.now(timezone.utc),
        answers=graded,
    )
