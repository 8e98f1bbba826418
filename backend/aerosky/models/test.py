"""
AeroSky - Test Result Model
Stores one graded, timed test attempt. Rows are written once and never updated.
"""
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aerosky.core.database import Base

if TYPE_CHECKING:
    from aerosky.models.user import User


class TestResult(Base):
    """Result of a submitted subject test."""
    
    __tablename__ = "test_results"
    
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), 
        primary_key=True, 
        default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), 
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True
    )
    test_type: Mapped[str] = mapped_column(String(50), index=True)
    
    # Score data
    score: Mapped[int] = mapped_column(Integer)  # Percentage, 0-100
    total_questions: Mapped[int] = mapped_column(Integer)
    correct_answers: Mapped[int] = mapped_column(Integer)
    
    # Timing
    time_taken: Mapped[int] = mapped_column(Integer)  # Seconds
    completed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True
    )
    
    # Graded answers in submission order
    # Format: [{ question_id, user_answer, correct_answer, is_correct }]
    answers: Mapped[list] = mapped_column(JSON, default=list)
    
    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="test_results")
    
    def __repr__(self):
        return f"<TestResult {self.test_type} score={self.score}%>"
