"""Feedback Schemas — wire DTOs for submitted difficulty feedback.

Invariants:
    - FeedbackCreate.to_record() is a field-for-field mapping, no defaults invented
    - difficulty_rating accepted as its int value (0-3)
"""

from pydantic import BaseModel, Field

from livequiz_feedback.core.domain_types import DifficultyRating
from livequiz_feedback.core.records import FeedbackRecord


class FeedbackCreate(BaseModel):
    """Feedback submission for one quiz question."""
    quiz_id: str = Field(min_length=1, max_length=64)
    username: str = Field(min_length=1, max_length=64)
    question_number: int = Field(ge=0)
    difficulty_rating: DifficultyRating
    message: str | None = Field(None, max_length=2000)

    def to_record(self) -> FeedbackRecord:
        return FeedbackRecord(
            quiz_id=self.quiz_id,
            username=self.username,
            question_number=self.question_number,
            difficulty_rating=self.difficulty_rating,
            message=self.message,
        )


class FeedbackResponse(BaseModel):
    id: int
    quiz_id: str
    username: str
    question_number: int
    difficulty_rating: DifficultyRating
    message: str | None = None

    @classmethod
    def from_record(cls, record: FeedbackRecord) -> "FeedbackResponse":
        return cls(
            id=record.id,
            quiz_id=record.quiz_id,
            username=record.username,
            question_number=record.question_number,
            difficulty_rating=record.difficulty_rating,
            message=record.message,
        )
