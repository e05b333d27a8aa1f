"""Feedback ORM — persists a user's difficulty rating for one quiz question.

Invariants:
    - difficulty_rating stores DifficultyRating.value (0-3)
    - message is optional free text
"""

from sqlalchemy import Integer, String, Text, Index
from sqlalchemy.orm import Mapped, mapped_column

from livequiz_feedback.db.base import Base


class Feedback(Base):
    """Feedback row: one rating per (quiz, question, user) submission."""
    __tablename__ = "feedback"
    __table_args__ = (
        Index("ix_feedback_quiz_question", "quiz_id", "question_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quiz_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    question_number: Mapped[int] = mapped_column(Integer, nullable=False)
    difficulty_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
