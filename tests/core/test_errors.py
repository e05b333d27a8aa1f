"""Error Hierarchy — codes, statuses and REST envelopes."""

from livequiz_feedback.core.errors import (
    DatabaseError, ErrorCategory, ErrorContext, LiveQuizError,
    PersistenceFailure, ResourceNotFoundError, ValidationError,
)


def test_validation_error_is_400():
    err = ValidationError("bad size", "size")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.category == ErrorCategory.VALIDATION


def test_persistence_failure_wraps_cause():
    cause = RuntimeError("connection reset")
    err = PersistenceFailure(cause)
    assert err.cause is cause
    assert err.__cause__ is cause
    assert err.http_status == 503
    assert "RuntimeError" in err.message


def test_database_error_names_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.operation == "commit"
    assert err.message == "Database commit failed: Integrity constraint violated"


def test_to_response_includes_context():
    err = ResourceNotFoundError(
        "Response", "Q1/0/amy", ErrorContext(quiz_id="Q1", username="amy"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == "resource_not_found"
    assert body["context"]["quiz_id"] == "Q1"
    assert body["context"]["username"] == "amy"
    assert "timestamp" in body


def test_all_errors_share_base():
    for err in (
        ValidationError("x", "size"),
        PersistenceFailure(ValueError()),
        DatabaseError("x", "query"),
    ):
        assert isinstance(err, LiveQuizError)
