"""Quiz Response Service — scored response queries, score totals and rankings.

Invariants:
    - get_highest_user_scores relies on storage ordering (total DESC, username ASC);
      the service never re-sorts, it only logs a contract violation
    - get_for_question_by_user succeeds with None when no row matches
    - Total score for a user with no responses is 0
"""

import logging

from livequiz_feedback.core.aggregation import is_ranked
from livequiz_feedback.core.page_spec import PageSpec
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.records import ResponseRecord, UserScore
from livequiz_feedback.core.repository_protocols import QuizResponseRepository
from livequiz_feedback.services.aggregation_service import RecordAggregationService
from livequiz_feedback.services.service_result import (
    ServiceResult, SingleServiceResult, UnpagedServiceResult,
)

logger = logging.getLogger(__name__)

_SCORE = "score"


class QuizResponseService(
    RecordAggregationService[ResponseRecord, QuizResponseRepository],
):
    """Persistence and aggregation of submitted ResponseRecords."""

    def get_for_quiz(
        self, quiz_id: str, *, username: str | None = None,
    ) -> UnpagedServiceResult[list[ResponseRecord]]:
        return self._list(RecordFilter(quiz_id=quiz_id, username=username))

    def get_all_for_question(
        self, quiz_id: str, question_number: int,
    ) -> UnpagedServiceResult[list[ResponseRecord]]:
        return self._list(
            RecordFilter(quiz_id=quiz_id, question_number=question_number),
        )

    async def get_for_question_by_user(
        self, quiz_id: str, question_number: int, username: str,
    ) -> SingleServiceResult[ResponseRecord | None]:
        return await self._find_one(RecordFilter(
            quiz_id=quiz_id, question_number=question_number, username=username,
        ))

    # ─── Counts ──────────────────────────────────────────────────

    async def count_for_quiz(self, quiz_id: str) -> SingleServiceResult[int]:
        return await self._count(RecordFilter(quiz_id=quiz_id))

    async def count_for_question(
        self, quiz_id: str, question_number: int, value: str | None = None,
    ) -> SingleServiceResult[int]:
        """Responses to a question; with `value`, only those giving that answer."""
        return await self._count(RecordFilter(
            quiz_id=quiz_id, question_number=question_number, value=value,
        ))

    async def count_for_user(self, username: str) -> SingleServiceResult[int]:
        return await self._count(RecordFilter(username=username))

    # ─── Scores ──────────────────────────────────────────────────

    def get_highest_user_scores(
        self, quiz_id: str,
    ) -> UnpagedServiceResult[list[UserScore]]:
        """Per-user quiz totals, highest first; ties broken by username."""
        async def get_page(page: PageSpec) -> list[UserScore]:
            scores = await self._repository.ranked_scores_for_quiz(quiz_id, page)
            if not is_ranked(scores):
                logger.warning(
                    "Storage returned user scores out of ranking order",
                    extra={"quiz_id": quiz_id, "operation": "rank"},
                )
            return scores

        return ServiceResult.unpaged(get_page)

    async def get_total_quiz_score_for_user(
        self, quiz_id: str, username: str,
    ) -> SingleServiceResult[int]:
        return await self._total(
            RecordFilter(quiz_id=quiz_id, username=username), _SCORE,
        )

    async def get_average_score_for_question(
        self, quiz_id: str, question_number: int,
    ) -> SingleServiceResult[float]:
        return await self._average(
            RecordFilter(quiz_id=quiz_id, question_number=question_number), _SCORE,
        )

    async def get_average_score_for_user(
        self, quiz_id: str, username: str,
    ) -> SingleServiceResult[float]:
        return await self._average(
            RecordFilter(quiz_id=quiz_id, username=username), _SCORE,
        )

    # ─── Writes ──────────────────────────────────────────────────

    async def save(self, response: ResponseRecord) -> SingleServiceResult[ResponseRecord]:
        return await self._save(response)

    async def remove_all_for_quiz(self, quiz_id: str) -> SingleServiceResult[int]:
        return await self._remove(RecordFilter(quiz_id=quiz_id))

    async def remove_all_by_user(
        self, quiz_id: str, username: str,
    ) -> SingleServiceResult[int]:
        return await self._remove(RecordFilter(quiz_id=quiz_id, username=username))

    async def remove_all_for_question(
        self, quiz_id: str, question_number: int,
    ) -> SingleServiceResult[int]:
        return await self._remove(
            RecordFilter(quiz_id=quiz_id, question_number=question_number),
        )
