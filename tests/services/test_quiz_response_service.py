"""Quiz Response Service — response queries, score totals and rankings.

Tests cover:
    - Averages are floating point over the matching rows, 0 when none match
    - Rankings: total DESC, username ASC, paged on request
    - Out-of-order rankings from storage are passed through and logged
    - Per-user lookups succeed with None when nothing matches
    - Deletions are scoped to quiz + user / quiz + question
"""

import logging
from unittest.mock import AsyncMock

import pytest

from livequiz_feedback.core.errors import PersistenceFailure
from livequiz_feedback.core.page_spec import PageSpec
from livequiz_feedback.core.records import ResponseRecord, UserScore
from livequiz_feedback.services.quiz_response_service import QuizResponseService

_SEED = [
    ("Q1", "amy", 0, "B", 4),
    ("Q1", "bob", 0, "A", 6),
    ("Q1", "zed", 0, "B", 10),
    ("Q1", "amy", 2, "C", 1),
    ("Q1", "bob", 2, "C", -1),
    ("Q1", "zed", 3, "D", -1),
    ("Q2", "amy", 0, "A", 50),
]


@pytest.fixture
async def seeded(response_service):
    stored = []
    for quiz_id, username, question, value, score in _SEED:
        result = await response_service.save(
            ResponseRecord(quiz_id, username, question, value, score),
        )
        stored.append((await result.result()).get_or_raise())
    return stored


async def _values(result):
    return (await result.result()).get_or_raise()


# ─── listings ────────────────────────────────────────────────────

async def test_get_for_quiz(response_service, seeded):
    records = await _values(response_service.get_for_quiz("Q1"))
    assert records == [r for r in seeded if r.quiz_id == "Q1"]


async def test_get_for_quiz_by_username(response_service, seeded):
    records = await _values(response_service.get_for_quiz("Q1", username="bob"))
    assert [(r.question_number, r.score) for r in records] == [(0, 6), (2, -1)]


async def test_get_all_for_question(response_service, seeded):
    records = await _values(response_service.get_all_for_question("Q1", 0))
    assert [r.username for r in records] == ["amy", "bob", "zed"]


async def test_get_all_for_question_second_page(response_service, seeded):
    result = response_service.get_all_for_question("Q1", 0).with_size(2).with_page(1)
    records = await _values(result)
    assert [r.username for r in records] == ["zed"]


async def test_get_for_question_by_user(response_service, seeded):
    record = await _values(
        await response_service.get_for_question_by_user("Q1", 2, "amy"),
    )
    assert record.value == "C"
    assert record.score == 1


async def test_get_for_question_by_user_missing_is_none(response_service, seeded):
    outcome = await (
        await response_service.get_for_question_by_user("Q1", 1, "amy")
    ).result()
    assert outcome.is_success
    assert outcome.get_or_none() is None


# ─── counts ──────────────────────────────────────────────────────

async def test_count_for_quiz(response_service, seeded):
    assert await _values(await response_service.count_for_quiz("Q1")) == 6


async def test_count_for_question(response_service, seeded):
    assert await _values(await response_service.count_for_question("Q1", 0)) == 3


async def test_count_for_question_with_value(response_service, seeded):
    result = await response_service.count_for_question("Q1", 0, "B")
    assert await _values(result) == 2


async def test_count_for_user_spans_quizzes(response_service, seeded):
    assert await _values(await response_service.count_for_user("amy")) == 3


# ─── scores ──────────────────────────────────────────────────────

async def test_average_score_for_question(response_service, seeded):
    result = await response_service.get_average_score_for_question("Q1", 0)
    assert await _values(result) == pytest.approx(20 / 3)


async def test_average_score_for_unanswered_question_is_zero(response_service, seeded):
    result = await response_service.get_average_score_for_question("Q1", 1)
    assert await _values(result) == 0


async def test_average_score_for_user(response_service, seeded):
    result = await response_service.get_average_score_for_user("Q1", "bob")
    assert await _values(result) == pytest.approx(2.5)


async def test_total_score_for_user(response_service, seeded):
    result = await response_service.get_total_quiz_score_for_user("Q1", "amy")
    assert await _values(result) == 5


async def test_total_score_without_responses_is_zero(response_service, seeded):
    result = await response_service.get_total_quiz_score_for_user("Q1", "nobody")
    assert await _values(result) == 0


async def test_highest_user_scores_ranked(response_service, seeded):
    scores = await _values(response_service.get_highest_user_scores("Q1"))
    assert scores == [
        UserScore("zed", 9), UserScore("amy", 5), UserScore("bob", 5),
    ]


async def test_highest_user_scores_paged(response_service, seeded):
    unpaged = response_service.get_highest_user_scores("Q1")
    top = await _values(unpaged.with_size(1))
    rest = await _values(unpaged.with_size(2).with_page(1))
    assert top == [UserScore("zed", 9)]
    assert rest == [UserScore("bob", 5)]


async def test_highest_user_scores_for_unknown_quiz(response_service, seeded):
    assert await _values(response_service.get_highest_user_scores("none")) == []


async def test_out_of_order_ranking_is_passed_through(caplog):
    unordered = [UserScore("amy", 1), UserScore("zed", 9)]
    repo = AsyncMock()
    repo.ranked_scores_for_quiz.return_value = unordered
    service = QuizResponseService(repo)

    with caplog.at_level(logging.WARNING):
        scores = await _values(service.get_highest_user_scores("Q1"))

    assert scores == unordered
    assert "out of ranking order" in caplog.text
    repo.ranked_scores_for_quiz.assert_awaited_once_with("Q1", PageSpec.unpaged())


# ─── deletions ───────────────────────────────────────────────────

async def test_remove_all_by_user_is_scoped_to_quiz(response_service, seeded):
    removed = await _values(await response_service.remove_all_by_user("Q1", "amy"))

    assert removed == 2
    assert await _values(await response_service.count_for_user("amy")) == 1


async def test_remove_all_for_question(response_service, seeded):
    before = await _values(await response_service.count_for_question("Q1", 0))
    removed = await _values(await response_service.remove_all_for_question("Q1", 0))

    assert removed == before == 3
    assert await _values(await response_service.count_for_question("Q1", 0)) == 0
    assert await _values(await response_service.count_for_quiz("Q1")) == 3


async def test_remove_all_for_quiz(response_service, seeded):
    removed = await _values(await response_service.remove_all_for_quiz("Q1"))
    assert removed == 6
    assert await _values(response_service.get_highest_user_scores("Q1")) == []


# ─── storage faults ──────────────────────────────────────────────

async def test_ranking_failure_is_translated():
    repo = AsyncMock()
    repo.ranked_scores_for_quiz.side_effect = TimeoutError()
    service = QuizResponseService(repo)

    outcome = await service.get_highest_user_scores("Q1").result()

    assert outcome.is_failure
    with pytest.raises(PersistenceFailure):
        outcome.get_or_raise()


async def test_save_failure_is_translated():
    repo = AsyncMock()
    repo.insert.side_effect = RuntimeError("constraint")
    service = QuizResponseService(repo)

    result = await service.save(ResponseRecord("Q1", "amy", 0, "A", 1))
    outcome = await result.result()

    assert isinstance(outcome.error.cause, RuntimeError)
