from __future__ import annotations

from datetime import timedelta

import pytest

from lib_fluent_temporal import (
    AssertionFailure,
    CalendarSystem,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Offset,
    OffsetDateTime,
    Period,
    should,
)

EARLY = Instant.from_utc(2020, 1, 1)
LATE = Instant.from_utc(2020, 1, 2)


def test_strict_comparisons() -> None:
    should(EARLY, "instant").be_less_than(LATE).and_.be_less_than_or_equal_to(LATE)
    should(LATE, "instant").be_greater_than(EARLY).and_.be_greater_than_or_equal_to(EARLY)


def test_equal_values_pass_only_the_inclusive_forms() -> None:
    should(EARLY, "instant").be_less_than_or_equal_to(EARLY).and_.be_greater_than_or_equal_to(EARLY)

    with pytest.raises(AssertionFailure) as excinfo:
        should(EARLY, "instant").be_less_than(EARLY)

    assert excinfo.value.message == (
        "Expected instant to be less than 2020-01-01T00:00:00Z, but found 2020-01-01T00:00:00Z."
    )


def test_comparison_failure_renders_subject() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(EARLY, "instant").be_greater_than(LATE, "time moves on")

    assert excinfo.value.message == (
        "Expected instant to be greater than 2020-01-02T00:00:00Z because time moves on, but found 2020-01-01T00:00:00Z."
    )


def test_comparison_on_absent_subject_fails() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "date", LocalDate).be_greater_than(LocalDate(2020, 1, 1))

    assert excinfo.value.message == "Expected date to be greater than 2020-01-01, but found <null>."


def test_comparison_with_none_is_a_usage_error() -> None:
    with pytest.raises(TypeError, match="cannot compare"):
        should(EARLY, "instant").be_less_than(None)


def test_dates_compare_across_calendars_by_absolute_day() -> None:
    coptic = LocalDate(2020, 1, 1).with_calendar(CalendarSystem.COPTIC)

    should(coptic, "date").be_greater_than(LocalDate(2019, 12, 31)).and_.be_less_than(LocalDate(2020, 1, 2))


def test_offset_date_times_compare_by_instant() -> None:
    local_later = OffsetDateTime(LocalDateTime.of(2020, 1, 1, 10), Offset.from_hours(2))
    local_earlier = OffsetDateTime(LocalDateTime.of(2020, 1, 1, 9), Offset.ZERO)

    should(local_later, "value").be_less_than(local_earlier)


def test_local_times_and_amounts_are_ordered() -> None:
    should(LocalTime(10, 0), "time").be_greater_than(LocalTime(9, 59, 59, 999_999_999))
    should(Duration.from_hours(1), "duration").be_less_than(timedelta(hours=2))
    should(Offset.from_hours(-1), "offset").be_less_than_or_equal_to(Offset.ZERO)


def test_periods_cannot_be_ordered() -> None:
    assert not hasattr(should(Period.ZERO, "period"), "be_less_than")
