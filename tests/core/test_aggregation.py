"""Aggregation Policy — average floor and ranking order, no IO."""

import pytest

from livequiz_feedback.core.aggregation import (
    average_of, floored_average, is_ranked, ranking_key, total_of,
)
from livequiz_feedback.core.records import Aggregate, UserScore


def test_average_of_empty_match_is_zero():
    assert floored_average(0, 0) == 0.0
    assert average_of(Aggregate(total=0, count=0)) == 0.0


def test_average_divides_by_row_count():
    assert average_of(Aggregate(total=20, count=3)) == pytest.approx(20 / 3)


def test_average_of_single_row_is_its_value():
    assert floored_average(7, 1) == 7.0


def test_total_of_is_integer():
    assert total_of(Aggregate(total=12.0, count=4)) == 12
    assert isinstance(total_of(Aggregate(total=12.0, count=4)), int)


def test_ranking_breaks_ties_by_username():
    scores = [UserScore("bob", 5), UserScore("amy", 5), UserScore("zed", 9)]
    ordered = sorted(scores, key=ranking_key)
    assert ordered == [UserScore("zed", 9), UserScore("amy", 5), UserScore("bob", 5)]


def test_is_ranked_detects_order():
    assert is_ranked([UserScore("zed", 9), UserScore("amy", 5), UserScore("bob", 5)])
    assert not is_ranked([UserScore("bob", 5), UserScore("amy", 5)])
    assert is_ranked([])
