"""
AeroSky - Practice Schemas
"""
from datetime import datetime
from typing import Annotated

from pydantic import Field

from aerosky.schemas.common import CamelModel


class PracticeUpdateRequest(CamelModel):
    """
    Increments for a subject's practice counters.

    Absent counters count as 0. Negative values are rejected so that
    cumulative counters can never go down.
    """
    subject: Annotated[str, Field(min_length=1, max_length=50)]
    questions_answered: Annotated[int, Field(ge=0)] = 0
    correct_answers: Annotated[int, Field(ge=0)] = 0
    time_spent: Annotated[int, Field(ge=0)] = 0  # Seconds


class PracticeSessionResponse(CamelModel):
    subject: str
    questions_answered: int
    correct_answers: int
    time_spent: int
    last_practiced: datetime
