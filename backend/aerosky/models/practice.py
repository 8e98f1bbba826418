"""
AeroSky - Practice Session Model
Cumulative, untimed practice counters. One row per (user, subject).
"""
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from aerosky.core.database import Base

if TYPE_CHECKING:
    from aerosky.models.user import User


class PracticeSession(Base):
    """Accumulated practice activity for one subject."""
    
    __tablename__ = "practice_sessions"
    __table_args__ = (
        UniqueConstraint("user_id", "subject", name="uq_practice_user_subject"),
    )
    
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
    subject: Mapped[str] = mapped_column(String(50))
    
    questions_answered: Mapped[int] = mapped_column(Integer, default=0)
    correct_answers: Mapped[int] = mapped_column(Integer, default=0)
    time_spent: Mapped[int] = mapped_column(Integer, default=0)  # Seconds
    last_practiced: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
    
    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="practice_sessions")
    
    def __repr__(self):
        return f"<PracticeSession {self.subject} answered={self.questions_answered}>"
