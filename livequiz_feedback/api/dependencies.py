"""Route Dependencies — service providers plus ServiceResult paging and unwrapping.

Invariants:
    - Services are built per request around the process-wide DatabaseSessionManager
    - size omitted → the unpaged result is read as-is
    - Page validation errors surface as ValidationError (400), never as a Failure
    - A Failure outcome is re-raised as its PersistenceFailure (503)
"""

from typing import TypeVar

from fastapi import Depends

from livequiz_feedback.config import get_settings
from livequiz_feedback.core.errors import ValidationError
from livequiz_feedback.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from livequiz_feedback.infrastructure.sql_repository import (
    SqlFeedbackRepository, SqlQuizResponseRepository,
)
from livequiz_feedback.services.feedback_service import FeedbackService
from livequiz_feedback.services.quiz_response_service import QuizResponseService
from livequiz_feedback.services.service_result import (
    ServiceResult, UnpagedServiceResult,
)

T = TypeVar("T")


def get_feedback_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> FeedbackService:
    return FeedbackService(SqlFeedbackRepository(db))


def get_quiz_response_service(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> QuizResponseService:
    return QuizResponseService(SqlQuizResponseRepository(db))


def select_page(
    result: UnpagedServiceResult[T], size: int | None, page: int,
) -> ServiceResult[T]:
    """Upgrade an unpaged result to the requested page, if a size was given."""
    if size is None:
        if page:
            raise ValidationError("A page index requires a page size", "page")
        return result
    size = min(size, get_settings().max_page_size)
    return result.with_size(size).with_page(page)


async def unwrap(result: ServiceResult[T]) -> T:
    outcome = await result.result()
    return outcome.get_or_raise()
