"""Domain Types — verifies rating enum values and record immutability."""

import dataclasses

import pytest

from livequiz_feedback.core.domain_types import DifficultyRating, QuizId, Username
from livequiz_feedback.core.records import FeedbackRecord, ResponseRecord


def test_identity_types_wrap_str():
    assert QuizId("Q1") == "Q1"
    assert Username("amy") == "amy"


def test_difficulty_rating_has_four_ordinal_values():
    assert [r.value for r in DifficultyRating] == [0, 1, 2, 3]
    assert DifficultyRating.EASY < DifficultyRating.IMPOSSIBLE


@pytest.mark.parametrize("value,expected", [
    (0, DifficultyRating.EASY),
    (1, DifficultyRating.DIFFICULT),
    (2, DifficultyRating.CHALLENGING),
    (3, DifficultyRating.IMPOSSIBLE),
])
def test_from_value_maps_stored_ints(value, expected):
    assert DifficultyRating.from_value(value) is expected


@pytest.mark.parametrize("value", [-1, 4, 99])
def test_from_value_rejects_unknown(value):
    with pytest.raises(ValueError):
        DifficultyRating.from_value(value)


def test_with_id_returns_copy_with_identifier():
    draft = FeedbackRecord("Q1", "amy", 0, DifficultyRating.EASY)
    stored = draft.with_id(12)
    assert stored.id == 12
    assert draft.id is None
    assert dataclasses.replace(stored, id=None) == draft


def test_records_are_frozen():
    response = ResponseRecord("Q1", "amy", 0, "2", 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.score = 10
