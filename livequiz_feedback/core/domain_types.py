"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - QuizId and Username are plain strings issued by the quiz service
    - DifficultyRating is ordinal: EASY < DIFFICULT < CHALLENGING < IMPOSSIBLE
    - DifficultyRating is persisted as its int value, never its name

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - int Enum for ratings: the stored value is what averages are computed over
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

QuizId = NewType("QuizId", str)
Username = NewType("Username", str)
RecordId = NewType("RecordId", int)


# ─── Enums ───────────────────────────────────────────────────────

class DifficultyRating(int, Enum):
    """How difficult a user found a quiz question."""
    EASY = 0
    DIFFICULT = 1
    CHALLENGING = 2
    IMPOSSIBLE = 3

    @classmethod
    def from_value(cls, value: int) -> "DifficultyRating":
        """Look up a rating by its stored int value."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown difficulty rating: {value}") from None
