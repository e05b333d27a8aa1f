"""SQL Repositories — SQLAlchemy implementation of the storage capability Protocols.

Invariants:
    - One session per call; writes commit before returning
    - RecordFilter fields map 1:1 onto model columns of the same name
    - Listings are ordered by id so pages are stable; unpaged means no LIMIT
    - aggregate_filtered returns COALESCE(SUM(col), 0) and COUNT(*) unchanged
    - ranked_scores_for_quiz orders by total_score DESC, username ASC

Design Decisions:
    - Generic base + per-table subclasses that only supply the row <-> record mapping
    - ORM rows never leave this module; callers see frozen core records
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import Delete, Select, delete, func, select

from livequiz_feedback.core.domain_types import DifficultyRating
from livequiz_feedback.core.page_spec import PageSpec
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.records import (
    Aggregate, FeedbackRecord, ResponseRecord, UserScore,
)
from livequiz_feedback.infrastructure.database import DatabaseSessionManager
from livequiz_feedback.models.feedback import Feedback
from livequiz_feedback.models.quiz_response import QuizResponse

logger = logging.getLogger(__name__)

R = TypeVar("R")
S = TypeVar("S", Select, Delete)


class SqlRecordRepository(Generic[R]):
    """Filtered queries against one table, returning core records."""

    model: type = None

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    def _to_record(self, row) -> R:
        raise NotImplementedError

    def _to_row(self, record: R):
        raise NotImplementedError

    def _filtered(self, statement: S, predicate: RecordFilter) -> S:
        for name, value in predicate.criteria().items():
            statement = statement.where(getattr(self.model, name) == value)
        return statement

    async def list_filtered(self, predicate: RecordFilter, page: PageSpec) -> list[R]:
        query = self._filtered(select(self.model), predicate).order_by(self.model.id)
        if page.is_paged:
            query = query.limit(page.size).offset(page.offset)
        async with self._db.session() as session:
            result = await session.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def count_filtered(self, predicate: RecordFilter) -> int:
        query = self._filtered(
            select(func.count()).select_from(self.model), predicate,
        )
        async with self._db.session() as session:
            result = await session.execute(query)
            return result.scalar_one()

    async def aggregate_filtered(self, predicate: RecordFilter, field: str) -> Aggregate:
        column = getattr(self.model, field)
        query = self._filtered(
            select(func.coalesce(func.sum(column), 0), func.count())
            .select_from(self.model),
            predicate,
        )
        async with self._db.session() as session:
            result = await session.execute(query)
            total, count = result.one()
        return Aggregate(total=float(total), count=int(count))

    async def delete_filtered(self, predicate: RecordFilter) -> int:
        statement = self._filtered(delete(self.model), predicate)
        async with self._db.session() as session:
            result = await session.execute(statement)
            await session.commit()
            return result.rowcount

    async def find_one(self, predicate: RecordFilter) -> R | None:
        query = self._filtered(select(self.model), predicate).order_by(self.model.id).limit(1)
        async with self._db.session() as session:
            result = await session.execute(query)
            row = result.scalars().first()
        return self._to_record(row) if row is not None else None

    async def insert(self, record: R) -> R:
        row = self._to_row(record)
        async with self._db.session() as session:
            session.add(row)
            await session.commit()
        logger.debug(
            f"Inserted {self.model.__tablename__} row {row.id}",
            extra={"quiz_id": row.quiz_id, "operation": "insert"},
        )
        return record.with_id(row.id)


class SqlFeedbackRepository(SqlRecordRepository[FeedbackRecord]):
    model = Feedback

    def _to_record(self, row: Feedback) -> FeedbackRecord:
        return FeedbackRecord(
            quiz_id=row.quiz_id,
            username=row.username,
            question_number=row.question_number,
            difficulty_rating=DifficultyRating.from_value(row.difficulty_rating),
            message=row.message,
            id=row.id,
        )

    def _to_row(self, record: FeedbackRecord) -> Feedback:
        return Feedback(
            quiz_id=record.quiz_id,
            username=record.username,
            question_number=record.question_number,
            difficulty_rating=int(record.difficulty_rating),
            message=record.message,
        )


class SqlQuizResponseRepository(SqlRecordRepository[ResponseRecord]):
    model = QuizResponse

    def _to_record(self, row: QuizResponse) -> ResponseRecord:
        return ResponseRecord(
            quiz_id=row.quiz_id,
            username=row.username,
            question_number=row.question_number,
            value=row.value,
            score=row.score,
            id=row.id,
        )

    def _to_row(self, record: ResponseRecord) -> QuizResponse:
        return QuizResponse(
            quiz_id=record.quiz_id,
            username=record.username,
            question_number=record.question_number,
            value=record.value,
            score=record.score,
        )

    async def ranked_scores_for_quiz(self, quiz_id: str, page: PageSpec) -> list[UserScore]:
        """Per-user score totals for a quiz, highest first, ties by username."""
        total_score = func.coalesce(func.sum(QuizResponse.score), 0).label("total_score")
        query = (
            select(QuizResponse.username, total_score)
            .where(QuizResponse.quiz_id == quiz_id)
            .group_by(QuizResponse.username)
            .order_by(total_score.desc(), QuizResponse.username.asc())
        )
        if page.is_paged:
            query = query.limit(page.size).offset(page.offset)
        async with self._db.session() as session:
            result = await session.execute(query)
            return [
                UserScore(username=username, total_score=int(score))
                for username, score in result.all()
            ]
