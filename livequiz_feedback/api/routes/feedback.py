"""Feedback Routes — submit, list, count, average and remove difficulty feedback.

Invariants:
    - Listings accept optional size/page; without size everything is returned
    - Averages over quizzes/questions without feedback return 0.0
    - Deletions return the number of rows removed
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from livequiz_feedback.api.dependencies import (
    get_feedback_service, select_page, unwrap,
)
from livequiz_feedback.core.domain_types import DifficultyRating
from livequiz_feedback.schemas.feedback import FeedbackCreate, FeedbackResponse
from livequiz_feedback.services.feedback_service import FeedbackService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["feedback"])


def _rating(value: int | None) -> DifficultyRating | None:
    return None if value is None else DifficultyRating.from_value(value)


@router.post(
    "/feedback", response_model=FeedbackResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_feedback(
    body: FeedbackCreate, service: FeedbackService = Depends(get_feedback_service),
):
    saved = await unwrap(await service.save(body.to_record()))
    logger.info(
        f"Feedback {saved.id} saved for question {saved.question_number}",
        extra={"quiz_id": saved.quiz_id, "username": saved.username},
    )
    return FeedbackResponse.from_record(saved)


@router.get("/quizzes/{quiz_id}/feedback", response_model=list[FeedbackResponse])
async def list_quiz_feedback(
    quiz_id: str,
    username: str | None = None,
    difficulty_rating: int | None = Query(None, ge=0, le=3),
    size: int | None = Query(None),
    page: int = Query(0),
    service: FeedbackService = Depends(get_feedback_service),
):
    result = service.get_for_quiz(
        quiz_id, username=username, difficulty_rating=_rating(difficulty_rating),
    )
    records = await unwrap(select_page(result, size, page))
    return [FeedbackResponse.from_record(r) for r in records]


@router.get("/quizzes/{quiz_id}/feedback/count")
async def count_quiz_feedback(
    quiz_id: str,
    difficulty_rating: int | None = Query(None, ge=0, le=3),
    service: FeedbackService = Depends(get_feedback_service),
):
    count = await unwrap(await service.count_for_quiz(quiz_id, _rating(difficulty_rating)))
    return {"quiz_id": quiz_id, "count": count}


@router.get("/quizzes/{quiz_id}/feedback/average-difficulty")
async def average_quiz_difficulty(
    quiz_id: str, service: FeedbackService = Depends(get_feedback_service),
):
    average = await unwrap(await service.get_average_difficulty_rating(quiz_id))
    return {"quiz_id": quiz_id, "average_difficulty": average}


@router.delete("/quizzes/{quiz_id}/feedback")
async def remove_quiz_feedback(
    quiz_id: str, service: FeedbackService = Depends(get_feedback_service),
):
    removed = await unwrap(await service.remove_all_for_quiz(quiz_id))
    return {"removed": removed}


# ─── Per question ────────────────────────────────────────────────

@router.get(
    "/quizzes/{quiz_id}/questions/{question_number}/feedback",
    response_model=list[FeedbackResponse],
)
async def list_question_feedback(
    quiz_id: str,
    question_number: int,
    username: str | None = None,
    difficulty_rating: int | None = Query(None, ge=0, le=3),
    size: int | None = Query(None),
    page: int = Query(0),
    service: FeedbackService = Depends(get_feedback_service),
):
    result = service.get_for_quiz_question(
        quiz_id, question_number,
        username=username, difficulty_rating=_rating(difficulty_rating),
    )
    records = await unwrap(select_page(result, size, page))
    return [FeedbackResponse.from_record(r) for r in records]


@router.get("/quizzes/{quiz_id}/questions/{question_number}/feedback/average-difficulty")
async def average_question_difficulty(
    quiz_id: str,
    question_number: int,
    service: FeedbackService = Depends(get_feedback_service),
):
    average = await unwrap(
        await service.get_average_difficulty_rating_for_question(quiz_id, question_number),
    )
    return {
        "quiz_id": quiz_id,
        "question_number": question_number,
        "average_difficulty": average,
    }


@router.delete("/quizzes/{quiz_id}/questions/{question_number}/feedback")
async def remove_question_feedback(
    quiz_id: str,
    question_number: int,
    service: FeedbackService = Depends(get_feedback_service),
):
    removed = await unwrap(
        await service.remove_all_for_quiz_question(quiz_id, question_number),
    )
    return {"removed": removed}


# ─── Per user ────────────────────────────────────────────────────

@router.get("/users/{username}/feedback/count")
async def count_user_feedback(
    username: str, service: FeedbackService = Depends(get_feedback_service),
):
    count = await unwrap(await service.count_for_user(username))
    return {"username": username, "count": count}


@router.delete("/users/{username}/feedback")
async def remove_user_feedback(
    username: str, service: FeedbackService = Depends(get_feedback_service),
):
    removed = await unwrap(await service.remove_all_by_user(username))
    return {"removed": removed}
