"""Quiz Response Routes — submit and query scored responses, totals and rankings.

Invariants:
    - GET .../scores is ranked by total score DESC, username ASC
    - A missing per-user question response is a 404, not an empty body
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from livequiz_feedback.api.dependencies import (
    get_quiz_response_service, select_page, unwrap,
)
from livequiz_feedback.core.errors import ErrorContext, ResourceNotFoundError
from livequiz_feedback.schemas.quiz_response import (
    QuizResponseCreate, QuizResponseResponse, UserScoreResponse,
)
from livequiz_feedback.services.quiz_response_service import QuizResponseService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1", tags=["responses"])


@router.post(
    "/responses", response_model=QuizResponseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_response(
    body: QuizResponseCreate,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    saved = await unwrap(await service.save(body.to_record()))
    logger.info(
        f"Response {saved.id} saved for question {saved.question_number}",
        extra={"quiz_id": saved.quiz_id, "username": saved.username},
    )
    return QuizResponseResponse.from_record(saved)


@router.get("/quizzes/{quiz_id}/responses", response_model=list[QuizResponseResponse])
async def list_quiz_responses(
    quiz_id: str,
    username: str | None = None,
    size: int | None = Query(None),
    page: int = Query(0),
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    result = service.get_for_quiz(quiz_id, username=username)
    records = await unwrap(select_page(result, size, page))
    return [QuizResponseResponse.from_record(r) for r in records]


@router.get("/quizzes/{quiz_id}/responses/count")
async def count_quiz_responses(
    quiz_id: str, service: QuizResponseService = Depends(get_quiz_response_service),
):
    count = await unwrap(await service.count_for_quiz(quiz_id))
    return {"quiz_id": quiz_id, "count": count}


@router.delete("/quizzes/{quiz_id}/responses")
async def remove_quiz_responses(
    quiz_id: str, service: QuizResponseService = Depends(get_quiz_response_service),
):
    removed = await unwrap(await service.remove_all_for_quiz(quiz_id))
    return {"removed": removed}


@router.get("/quizzes/{quiz_id}/scores", response_model=list[UserScoreResponse])
async def list_highest_scores(
    quiz_id: str,
    size: int | None = Query(None),
    page: int = Query(0),
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    result = service.get_highest_user_scores(quiz_id)
    scores = await unwrap(select_page(result, size, page))
    return [UserScoreResponse.from_score(s) for s in scores]


# ─── Per user ────────────────────────────────────────────────────

@router.get("/quizzes/{quiz_id}/users/{username}/score")
async def get_user_score(
    quiz_id: str,
    username: str,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    total = await unwrap(await service.get_total_quiz_score_for_user(quiz_id, username))
    average = await unwrap(await service.get_average_score_for_user(quiz_id, username))
    return {
        "quiz_id": quiz_id,
        "username": username,
        "total_score": total,
        "average_score": average,
    }


@router.delete("/quizzes/{quiz_id}/users/{username}/responses")
async def remove_user_responses(
    quiz_id: str,
    username: str,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    removed = await unwrap(await service.remove_all_by_user(quiz_id, username))
    return {"removed": removed}


# ─── Per question ────────────────────────────────────────────────

@router.get(
    "/quizzes/{quiz_id}/questions/{question_number}/responses",
    response_model=list[QuizResponseResponse],
)
async def list_question_responses(
    quiz_id: str,
    question_number: int,
    size: int | None = Query(None),
    page: int = Query(0),
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    result = service.get_all_for_question(quiz_id, question_number)
    records = await unwrap(select_page(result, size, page))
    return [QuizResponseResponse.from_record(r) for r in records]


@router.get("/quizzes/{quiz_id}/questions/{question_number}/responses/count")
async def count_question_responses(
    quiz_id: str,
    question_number: int,
    value: str | None = None,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    count = await unwrap(
        await service.count_for_question(quiz_id, question_number, value),
    )
    return {"quiz_id": quiz_id, "question_number": question_number, "count": count}


@router.get("/quizzes/{quiz_id}/questions/{question_number}/responses/average-score")
async def average_question_score(
    quiz_id: str,
    question_number: int,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    average = await unwrap(
        await service.get_average_score_for_question(quiz_id, question_number),
    )
    return {
        "quiz_id": quiz_id,
        "question_number": question_number,
        "average_score": average,
    }


@router.get(
    "/quizzes/{quiz_id}/questions/{question_number}/users/{username}/response",
    response_model=QuizResponseResponse,
)
async def get_user_question_response(
    quiz_id: str,
    question_number: int,
    username: str,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    record = await unwrap(
        await service.get_for_question_by_user(quiz_id, question_number, username),
    )
    if record is None:
        raise ResourceNotFoundError(
            "Response", f"{quiz_id}/{question_number}/{username}",
            ErrorContext(quiz_id=quiz_id, username=username, operation="find_one"),
        )
    return QuizResponseResponse.from_record(record)


@router.delete("/quizzes/{quiz_id}/questions/{question_number}/responses")
async def remove_question_responses(
    quiz_id: str,
    question_number: int,
    service: QuizResponseService = Depends(get_quiz_response_service),
):
    removed = await unwrap(
        await service.remove_all_for_question(quiz_id, question_number),
    )
    return {"removed": removed}
