"""Quiz Response ORM — persists one scored answer to a quiz question.

Invariants:
    - value is the user's answer as text (choice index for multiple-choice)
    - score is the integer score awarded to this single response
"""

from sqlalchemy import Integer, String, Index
from sqlalchemy.orm import Mapped, mapped_column

from livequiz_feedback.db.base import Base


class QuizResponse(Base):
    __tablename__ = "response"
    __table_args__ = (
        Index("ix_response_quiz_question", "quiz_id", "question_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quiz_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    question_number: Mapped[int] = mapped_column(Integer, nullable=False)
    value: Mapped[str] = mapped_column(String(1000), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
