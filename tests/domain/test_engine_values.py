from __future__ import annotations

import pytest

from lib_fluent_temporal.domain import AssertionFailure, Continuation, PreconditionError, Subject, WhichContinuation


def test_subject_presence() -> None:
    assert Subject(0, "zero").is_present
    assert not Subject(None, "nothing").is_present


def test_reading_absent_subject_is_a_precondition_error() -> None:
    with pytest.raises(PreconditionError, match="'nothing' is absent"):
        _ = Subject(None, "nothing").value


def test_failure_is_an_assertion_error_with_message() -> None:
    failure = AssertionFailure("Expected date to have day 1, but date was <null>.")

    assert isinstance(failure, AssertionError)
    assert str(failure) == failure.message == "Expected date to have day 1, but date was <null>."


def test_continuations_are_immutable() -> None:
    continuation = WhichContinuation("assertions", 5)

    assert isinstance(continuation, Continuation)
    assert (continuation.and_, continuation.which) == ("assertions", 5)
    with pytest.raises(AttributeError):
        continuation.which = 6  # type: ignore[misc]
