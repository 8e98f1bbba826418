"""AeroSky - Question Schemas."""
from aerosky.core.question_bank import Question
from aerosky.schemas.common import CamelModel


class QuestionResponse(CamelModel):
    """A question as served to the client, correct answer included."""
    id: int
    question: str
    options: list[str]
    correct_answer: str

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            question=question.text,
            options=list(question.options),
            correct_answer=question.correct_answer,
        )
