"""Domain Records — immutable feedback, response and score values.

Invariants:
    - Records are frozen; id is the only field storage may populate (via with_id)
    - question_number is a zero-based index into the quiz
    - UserScore is derived by storage and never persisted
"""

from dataclasses import dataclass, replace

from livequiz_feedback.core.domain_types import DifficultyRating


@dataclass(frozen=True)
class FeedbackRecord:
    """A user's difficulty rating (and optional message) for one quiz question."""
    quiz_id: str
    username: str
    question_number: int
    difficulty_rating: DifficultyRating
    message: str | None = None
    id: int | None = None

    def with_id(self, record_id: int) -> "FeedbackRecord":
        return replace(self, id=record_id)


@dataclass(frozen=True)
class ResponseRecord:
    """A user's scored answer to one quiz question.

    value is the raw input converted to text; multiple-choice answers
    arrive as the chosen index.
    """
    quiz_id: str
    username: str
    question_number: int
    value: str
    score: int
    id: int | None = None

    def with_id(self, record_id: int) -> "ResponseRecord":
        return replace(self, id=record_id)


@dataclass(frozen=True)
class UserScore:
    username: str
    total_score: int


@dataclass(frozen=True)
class Aggregate:
    """Raw SUM and COUNT over the rows matched by an aggregate query."""
    total: float
    count: int
