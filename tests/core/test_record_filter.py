"""Record Filter — conjunction semantics and criteria extraction."""

from livequiz_feedback.core.domain_types import DifficultyRating
from livequiz_feedback.core.record_filter import RecordFilter
from livequiz_feedback.core.records import FeedbackRecord, ResponseRecord


def _feedback(**overrides):
    fields = dict(
        quiz_id="Q1", username="amy", question_number=2,
        difficulty_rating=DifficultyRating.CHALLENGING, message=None,
    )
    fields.update(overrides)
    return FeedbackRecord(**fields)


def test_criteria_skips_unset_fields():
    predicate = RecordFilter(quiz_id="Q1", question_number=0)
    assert predicate.criteria() == {"quiz_id": "Q1", "question_number": 0}


def test_question_zero_is_a_real_constraint():
    predicate = RecordFilter(question_number=0)
    assert "question_number" in predicate.criteria()


def test_empty_filter_matches_everything():
    assert RecordFilter().matches(_feedback())
    assert RecordFilter().criteria() == {}


def test_all_fields_must_match():
    predicate = RecordFilter(quiz_id="Q1", username="amy", question_number=2)
    assert predicate.matches(_feedback())
    assert not predicate.matches(_feedback(username="bob"))
    assert not predicate.matches(_feedback(question_number=3))


def test_rating_matches_by_int_value():
    predicate = RecordFilter(quiz_id="Q1", difficulty_rating=2)
    assert predicate.matches(_feedback())
    assert not predicate.matches(_feedback(difficulty_rating=DifficultyRating.EASY))


def test_value_filter_applies_to_responses():
    response = ResponseRecord(
        quiz_id="Q1", username="amy", question_number=0, value="3", score=4,
    )
    assert RecordFilter(quiz_id="Q1", value="3").matches(response)
    assert not RecordFilter(quiz_id="Q1", value="1").matches(response)


def test_describe_lists_populated_fields():
    assert RecordFilter(quiz_id="Q1", username="amy").describe() == "quiz_id=Q1 username=amy"
    assert RecordFilter().describe() == "all"
