"""Aggregation Policy — numeric and ordering rules shared by both record families.

Invariants:
    - floored_average(total, count) == total / max(1, count); never divides by zero
    - Ranking order is total_score DESC, username ASC (storage must honor it)
"""

from livequiz_feedback.core.records import Aggregate, UserScore


def floored_average(total: float, count: int) -> float:
    """Average over matched rows, 0.0 when nothing matched."""
    return float(total) / max(1, count)


def average_of(aggregate: Aggregate) -> float:
    return floored_average(aggregate.total, aggregate.count)


def total_of(aggregate: Aggregate) -> int:
    return int(aggregate.total or 0)


def ranking_key(score: UserScore) -> tuple[int, str]:
    """Sort key matching the storage ranking contract."""
    return (-score.total_score, score.username)


def is_ranked(scores: list[UserScore]) -> bool:
    """True if scores already follow the ranking contract."""
    return all(
        ranking_key(a) <= ranking_key(b) for a, b in zip(scores, scores[1:])
    )
