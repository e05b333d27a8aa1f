"""Boundary Protocols — storage capability contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Every storage method performs exactly one logical query
    - aggregate_filtered returns the raw SUM/COUNT; callers apply the average floor
    - ranked_scores_for_quiz is ordered by total_score DESC, username ASC

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; core only describes the contract
"""

from typing import Protocol, TypeVar

from livequiz_feedback.core.page_spec import PageSpec
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.records import Aggregate, ResponseRecord, UserScore

R = TypeVar("R")


class RecordRepository(Protocol[R]):
    """Filtered list/count/aggregate/delete/insert contract, implemented by shell."""
    async def list_filtered(
        self, predicate: RecordFilter, page: PageSpec,
    ) -> list[R]: ...
    async def count_filtered(self, predicate: RecordFilter) -> int: ...
    async def aggregate_filtered(
        self, predicate: RecordFilter, field: str,
    ) -> Aggregate: ...
    async def delete_filtered(self, predicate: RecordFilter) -> int: ...
    async def find_one(self, predicate: RecordFilter) -> R | None: ...
    async def insert(self, record: R) -> R: ...


class QuizResponseRepository(RecordRepository[ResponseRecord], Protocol):
    """Response storage adds the per-user score ranking."""
    async def ranked_scores_for_quiz(
        self, quiz_id: str, page: PageSpec,
    ) -> list[UserScore]: ...
