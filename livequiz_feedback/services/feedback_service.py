"""Feedback Service — difficulty-rating feedback queries for quizzes and questions.

Invariants:
    - Listings are unpaged until the caller asks for a size
    - Average difficulty is computed over DifficultyRating int values (0-3)
"""

from livequiz_feedback.core.domain_types import DifficultyRating
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.records import FeedbackRecord
from livequiz_feedback.core.repository_protocols import RecordRepository
from livequiz_feedback.services.aggregation_service import RecordAggregationService
from livequiz_feedback.services.service_result import (
    SingleServiceResult, UnpagedServiceResult,
)

_RATING = "difficulty_rating"


def _rating_value(rating: DifficultyRating | None) -> int | None:
    return None if rating is None else int(rating)


class FeedbackService(
    RecordAggregationService[FeedbackRecord, RecordRepository[FeedbackRecord]],
):
    """Persistence and aggregation of submitted FeedbackRecords."""

    # ─── Listings ────────────────────────────────────────────────

    def get_for_quiz(
        self,
        quiz_id: str,
        *,
        username: str | None = None,
        difficulty_rating: DifficultyRating | None = None,
    ) -> UnpagedServiceResult[list[FeedbackRecord]]:
        """All feedback for a quiz, optionally narrowed to a user and/or rating."""
        return self._list(RecordFilter(
            quiz_id=quiz_id,
            username=username,
            difficulty_rating=_rating_value(difficulty_rating),
        ))

    def get_for_quiz_question(
        self,
        quiz_id: str,
        question_number: int,
        *,
        username: str | None = None,
        difficulty_rating: DifficultyRating | None = None,
    ) -> UnpagedServiceResult[list[FeedbackRecord]]:
        """All feedback for one question, optionally narrowed to a user and/or rating."""
        return self._list(RecordFilter(
            quiz_id=quiz_id,
            question_number=question_number,
            username=username,
            difficulty_rating=_rating_value(difficulty_rating),
        ))

    # ─── Counts ──────────────────────────────────────────────────

    async def count_for_quiz(
        self, quiz_id: str, difficulty_rating: DifficultyRating | None = None,
    ) -> SingleServiceResult[int]:
        return await self._count(RecordFilter(
            quiz_id=quiz_id, difficulty_rating=_rating_value(difficulty_rating),
        ))

    async def count_for_user(self, username: str) -> SingleServiceResult[int]:
        return await self._count(RecordFilter(username=username))

    # ─── Averages ────────────────────────────────────────────────

    async def get_average_difficulty_rating(
        self, quiz_id: str,
    ) -> SingleServiceResult[float]:
        return await self._average(RecordFilter(quiz_id=quiz_id), _RATING)

    async def get_average_difficulty_rating_for_question(
        self, quiz_id: str, question_number: int,
    ) -> SingleServiceResult[float]:
        return await self._average(
            RecordFilter(quiz_id=quiz_id, question_number=question_number), _RATING,
        )

    # ─── Writes ──────────────────────────────────────────────────

    async def save(self, feedback: FeedbackRecord) -> SingleServiceResult[FeedbackRecord]:
        """Persist new feedback; the stored copy carries its assigned id."""
        return await self._save(feedback)

    async def remove_all_for_quiz(self, quiz_id: str) -> SingleServiceResult[int]:
        return await self._remove(RecordFilter(quiz_id=quiz_id))

    async def remove_all_by_user(self, username: str) -> SingleServiceResult[int]:
        return await self._remove(RecordFilter(username=username))

    async def remove_all_for_quiz_question(
        self, quiz_id: str, question_number: int,
    ) -> SingleServiceResult[int]:
        return await self._remove(
            RecordFilter(quiz_id=quiz_id, question_number=question_number),
        )
