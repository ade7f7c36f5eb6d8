from __future__ import annotations

from datetime import timedelta

import pytest

from lib_fluent_temporal import AssertionFailure, Duration, should

DAY_AND_TWO_HOURS = Duration.from_hours(26)


def test_components() -> None:
    (
        should(DAY_AND_TWO_HOURS, "duration")
        .have_days(1)
        .and_.have_hours(2)
        .and_.have_minutes(0)
        .and_.have_nanosecond_of_day(7_200_000_000_000)
    )

    with pytest.raises(AssertionFailure) as excinfo:
        should(DAY_AND_TWO_HOURS, "duration").have_hours(3)

    assert excinfo.value.message == "Expected duration to have 3 hours, but found 2."


def test_sub_second_components() -> None:
    value = Duration.from_milliseconds(1_500)

    should(value, "duration").have_milliseconds(500).and_.have_subsecond_in_ticks(5_000_000)
    should(value, "duration").have_subsecond_in_nanoseconds(500_000_000)


def test_ticks_render_grouped() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(Duration.from_seconds(1), "duration").have_ticks(1)

    assert excinfo.value.message == "Expected duration to have 1 ticks, but found 10,000,000."


def test_totals_use_precision() -> None:
    should(DAY_AND_TWO_HOURS, "duration").have_total_hours(26.005).and_.have_total_days(1.08)
    should(DAY_AND_TWO_HOURS, "duration").have_total_hours(26.5, precision=1.0)

    with pytest.raises(AssertionFailure) as excinfo:
        should(DAY_AND_TWO_HOURS, "duration").have_total_hours(26.5)

    assert excinfo.value.message == (
        "Expected duration to have 26.5 total number of hours (+/- 0.01), but found 26.0."
    )


def test_negated_total() -> None:
    should(DAY_AND_TWO_HOURS, "duration").not_have_total_minutes(1.0)

    with pytest.raises(AssertionFailure) as excinfo:
        should(DAY_AND_TWO_HOURS, "duration").not_have_total_minutes(1560.0)

    assert excinfo.value.message == "Did not expect duration to have 1560.0 total number of minutes (+/- 0.01)."


def test_sign_assertions() -> None:
    should(Duration.from_seconds(1), "duration").be_positive()
    should(-Duration.from_seconds(1), "duration").be_negative()
    should(Duration.ZERO, "duration").be_zero()

    with pytest.raises(AssertionFailure) as excinfo:
        should(Duration.ZERO, "duration").be_positive()
    assert excinfo.value.message == "Expected duration to be positive, but found 0:00:00:00."

    with pytest.raises(AssertionFailure) as excinfo:
        should(Duration.ZERO, "duration").not_be_zero()
    assert excinfo.value.message == "Did not expect duration to be zero, but found 0:00:00:00."

    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "duration", Duration).be_negative()
    assert excinfo.value.message == "Expected duration to be negative, but found <null>."


def test_equality_accepts_timedelta() -> None:
    should(Duration.from_minutes(90), "duration").be(timedelta(minutes=90)).and_.not_be(timedelta(minutes=91))


def test_absent_duration_uses_found_tail() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "duration", Duration).have_total_days(1.0)

    assert excinfo.value.message == "Expected duration to have 1.0 total number of days (+/- 0.01), but found <null>."
