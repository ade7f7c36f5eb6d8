from __future__ import annotations

from datetime import timedelta

import pytest

from lib_fluent_temporal import AssertionFailure, Duration, Instant, Offset, should

MOMENT = Instant.from_utc(2020, 1, 1)


def test_be_close_to_is_inclusive() -> None:
    should(MOMENT, "instant").be_close_to(MOMENT + Duration.from_seconds(1), Duration.from_seconds(1))
    should(MOMENT, "instant").be_close_to(MOMENT - Duration.from_milliseconds(500), timedelta(seconds=1))


def test_be_close_to_failure_reports_distance() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(MOMENT, "instant").be_close_to(MOMENT + Duration.from_seconds(2), timedelta(seconds=1))

    assert excinfo.value.message == (
        "Expected instant to be within 0:00:00:01 from 2020-01-01T00:00:02Z, but it was 0:00:00:02."
    )


def test_not_be_close_to() -> None:
    should(Duration.from_seconds(10), "duration").not_be_close_to(Duration.from_seconds(13), Duration.from_seconds(2))

    with pytest.raises(AssertionFailure) as excinfo:
        should(Duration.from_seconds(10), "duration").not_be_close_to(
            Duration.from_seconds(12), Duration.from_seconds(2)
        )

    assert excinfo.value.message == (
        "Did not expect duration to be within 0:00:00:02 from 0:00:00:12, but it was 0:00:00:02."
    )


def test_offset_proximity() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(Offset.from_hours(1), "offset").be_close_to(Offset.from_hours(2), timedelta(minutes=30))

    assert excinfo.value.message == "Expected offset to be within 0:00:30:00 from +02:00, but it was 0:01:00:00."


def test_proximity_on_absent_subject() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "duration", Duration).be_close_to(Duration.from_seconds(12), Duration.from_seconds(1))

    assert excinfo.value.message == "Expected duration to be within 0:00:00:01 from 0:00:00:12, but found <null>."


def test_negative_precision_is_rejected() -> None:
    with pytest.raises(ValueError, match="The value of precision must be non-negative."):
        should(MOMENT, "instant").be_close_to(MOMENT, Duration(-1))


def test_precision_must_be_a_duration() -> None:
    with pytest.raises(TypeError, match="precision must be a Duration or timedelta"):
        should(MOMENT, "instant").be_close_to(MOMENT, 5)
