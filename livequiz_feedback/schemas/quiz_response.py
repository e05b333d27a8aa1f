"""Quiz Response Schemas — wire DTOs for scored responses and score rankings."""

from pydantic import BaseModel, Field

from livequiz_feedback.core.records import ResponseRecord, UserScore


class QuizResponseCreate(BaseModel):
    """Scored answer to one quiz question. value is the answer as text."""
    quiz_id: str = Field(min_length=1, max_length=64)
    username: str = Field(min_length=1, max_length=64)
    question_number: int = Field(ge=0)
    value: str = Field(max_length=1000)
    score: int

    def to_record(self) -> ResponseRecord:
        return ResponseRecord(
            quiz_id=self.quiz_id,
            username=self.username,
            question_number=self.question_number,
            value=self.value,
            score=self.score,
        )


class QuizResponseResponse(BaseModel):
    id: int
    quiz_id: str
    username: str
    question_number: int
    value: str
    score: int

    @classmethod
    def from_record(cls, record: ResponseRecord) -> "QuizResponseResponse":
        return cls(
            id=record.id,
            quiz_id=record.quiz_id,
            username=record.username,
            question_number=record.question_number,
            value=record.value,
            score=record.score,
        )


class UserScoreResponse(BaseModel):
    username: str
    total_score: int

    @classmethod
    def from_score(cls, score: UserScore) -> "UserScoreResponse":
        return cls(username=score.username, total_score=score.total_score)
