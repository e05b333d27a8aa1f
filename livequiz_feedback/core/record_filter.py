"""Record Filter — conjunctive predicate over the quiz/question/user key space.

Invariants:
    - A filter is a conjunction: every populated field must match
    - Unpopulated (None) fields do not constrain the match
    - Field names equal the record attribute and storage column names

Design Decisions:
    - One filter type for both record families: difficulty_rating only applies
      to feedback, value only to responses; storage maps names to columns
"""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class RecordFilter:
    quiz_id: str | None = None
    question_number: int | None = None
    username: str | None = None
    difficulty_rating: int | None = None
    value: str | None = None

    def criteria(self) -> dict[str, Any]:
        """Populated fields only, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def matches(self, record: object) -> bool:
        """Evaluate the conjunction against any record exposing the same attributes."""
        return all(
            getattr(record, name, None) == expected
            for name, expected in self.criteria().items()
        )

    def describe(self) -> str:
        """Compact `name=value` form for log lines."""
        return " ".join(f"{k}={v}" for k, v in self.criteria().items()) or "all"
