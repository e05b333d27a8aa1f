"""Record Aggregation Service — filtered queries over one record family, returned as ServiceResults.

Invariants:
    - Every helper delegates to exactly ONE storage capability call
    - Collection helpers return an UnpagedServiceResult (nothing runs until read)
    - Scalar helpers run immediately and return a SingleServiceResult
    - Averages use floored_average: empty matches give 0.0, never ZeroDivisionError
    - The only failure mode is a PersistenceFailure inside the outcome

Design Decisions:
    - One generic class parameterized over record type and repository;
      FeedbackService and QuizResponseService only name their predicates
    - Producers are closures over the filter: the envelope never owns the repository
"""

import logging
from typing import Generic, TypeVar

from livequiz_feedback.core.aggregation import average_of, total_of
from livequiz_feedback.core.page_spec import PageSpec
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.repository_protocols import RecordRepository
from livequiz_feedback.services.service_result import (
    ServiceResult, SingleServiceResult, UnpagedServiceResult,
)

logger = logging.getLogger(__name__)

R = TypeVar("R")
Repo = TypeVar("Repo", bound=RecordRepository)


class RecordAggregationService(Generic[R, Repo]):
    """Shared filter/count/aggregate/delete plumbing for one record family."""

    def __init__(self, repository: Repo):
        self._repository = repository

    def _list(self, predicate: RecordFilter) -> UnpagedServiceResult[list[R]]:
        async def get_page(page: PageSpec) -> list[R]:
            logger.debug(
                f"Listing {predicate.describe()} (page size={page.size}, index={page.index})",
                extra={"quiz_id": predicate.quiz_id, "operation": "list"},
            )
            return await self._repository.list_filtered(predicate, page)

        return ServiceResult.unpaged(get_page)

    async def _count(self, predicate: RecordFilter) -> SingleServiceResult[int]:
        return await ServiceResult.single(
            lambda: self._repository.count_filtered(predicate),
        )

    async def _average(
        self, predicate: RecordFilter, field: str,
    ) -> SingleServiceResult[float]:
        async def get_average() -> float:
            aggregate = await self._repository.aggregate_filtered(predicate, field)
            return average_of(aggregate)

        return await ServiceResult.single(get_average)

    async def _total(
        self, predicate: RecordFilter, field: str,
    ) -> SingleServiceResult[int]:
        async def get_total() -> int:
            aggregate = await self._repository.aggregate_filtered(predicate, field)
            return total_of(aggregate)

        return await ServiceResult.single(get_total)

    async def _remove(self, predicate: RecordFilter) -> SingleServiceResult[int]:
        async def delete() -> int:
            removed = await self._repository.delete_filtered(predicate)
            logger.info(
                f"Removed {removed} record(s) for {predicate.describe()}",
                extra={
                    "quiz_id": predicate.quiz_id,
                    "username": predicate.username,
                    "operation": "delete",
                },
            )
            return removed

        return await ServiceResult.single(delete)

    async def _find_one(self, predicate: RecordFilter) -> SingleServiceResult[R | None]:
        return await ServiceResult.single(
            lambda: self._repository.find_one(predicate),
        )

    async def _save(self, record: R) -> SingleServiceResult[R]:
        return await ServiceResult.single(
            lambda: self._repository.insert(record),
        )
