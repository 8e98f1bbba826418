"""
AeroSky - Question Bank
Static, read-only multiple-choice questions grouped by subject.

The bank is built once at import time and shared by reference. Nothing
mutates it afterwards, so concurrent readers need no locking.
"""
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


# Closed set of subjects. Analytics reports exactly these buckets,
# so a new subject must be added here and to the bank data together.
SUBJECTS: tuple[str, ...] = ("math", "science", "english")


@dataclass(frozen=True)
class Question:
    """A single multiple-choice question."""
    id: int
    text: str
    options: tuple[str, ...]
    correct_answer: str


class QuestionBank:
    """Immutable subject -> ordered questions lookup."""

    def __init__(self, questions: Mapping[str, Iterable[Question]]):
        self._questions = MappingProxyType(
            {subject: tuple(items) for subject, items in questions.items()}
        )

    def questions_for(self, subject: str) -> tuple[Question, ...]:
        """Questions for a subject in bank order; empty for an unknown subject."""
        return self._questions.get(subject, ())

    @property
    def subjects(self) -> tuple[str, ...]:
        return tuple(self._questions)

    def __len__(self) -> int:
        return sum(len(items) for items in self._questions.values())

    @classmethod
    def from_records(cls, records: Mapping[str, list[dict]]) -> "QuestionBank":
        """
        Build a bank from plain dictionaries.

        Each record needs ``id``, ``question``, ``options`` and ``correctAnswer``.
        """
        return cls({
            subject: [
                Question(
                    id=int(item["id"]),
                    text=item["question"],
                    options=tuple(item["options"]),
                    correct_answer=item["correctAnswer"],
                )
                for item in items
            ]
            for subject, items in records.items()
        })


DEFAULT_QUESTIONS: dict[str, list[dict]] = {
    "math": [
        {
            "id": 1,
            "question": "What is 15 + 27?",
            "options": ["40", "42", "45", "47"],
            "correctAnswer": "42",
        },
        {
            "id": 2,
            "question": "What is the square root of 144?",
            "options": ["10", "11", "12", "13"],
            "correctAnswer": "12",
        },
        {
            "id": 3,
            "question": "What is 8 × 9?",
            "options": ["70", "71", "72", "73"],
            "correctAnswer": "72",
        },
    ],
    "science": [
        {
            "id": 1,
            "question": "What is the chemical symbol for Gold?",
            "options": ["Go", "Gd", "Au", "Ag"],
            "correctAnswer": "Au",
        },
        {
            "id": 2,
            "question": "How many bones are there in an adult human body?",
            "options": ["204", "206", "208", "210"],
            "correctAnswer": "206",
        },
        {
            "id": 3,
            "question": "What gas do plants absorb from the atmosphere?",
            "options": ["Oxygen", "Nitrogen", "Carbon Dioxide", "Hydrogen"],
            "correctAnswer": "Carbon Dioxide",
        },
    ],
    "english": [
        {
            "id": 1,
            "question": "Which is the correct spelling?",
            "options": ["Recieve", "Receive", "Receeve", "Receve"],
            "correctAnswer": "Receive",
        },
        {
            "id": 2,
            "question": "What is the past tense of 'run'?",
            "options": ["Runned", "Ran", "Run", "Running"],
            "correctAnswer": "Ran",
        },
        {
            "id": 3,
            "question": "Which is a synonym for 'happy'?",
            "options": ["Sad", "Joyful", "Angry", "Tired"],
            "correctAnswer": "Joyful",
        },
    ],
}


question_bank = QuestionBank.from_records(DEFAULT_QUESTIONS)


def get_question_bank() -> QuestionBank:
    """Dependency returning the shared question bank."""
    return question_bank
