from __future__ import annotations

from datetime import datetime, time, timedelta, timezone

import pytest

from lib_fluent_temporal import (
    AssertionFailure,
    CalendarSystem,
    Era,
    IsoDayOfWeek,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Offset,
    OffsetDateTime,
    OffsetTime,
    should,
)

MOMENT = LocalDateTime.of(2020, 1, 1, 10, 15, 30)


def test_local_date_fields_and_calendar() -> None:
    (
        should(LocalDate(2020, 1, 1), "date")
        .have_day_of_week(IsoDayOfWeek.WEDNESDAY)
        .and_.have_day_of_year(1)
        .and_.have_year_of_era(2020)
        .and_.have_era(Era.COMMON)
    )

    with pytest.raises(AssertionFailure) as excinfo:
        should(LocalDate(2020, 1, 1), "date").have_day_of_week(IsoDayOfWeek.MONDAY)

    assert excinfo.value.message == "Expected date to have day of week Monday, but found Wednesday."


def test_be_in_calendar_returns_the_calendar() -> None:
    continuation = should(LocalDate(2020, 1, 1), "date").be_in_calendar("iso")

    assert continuation.which is CalendarSystem.ISO

    with pytest.raises(AssertionFailure) as excinfo:
        should(LocalDate(2020, 1, 1), "date").be_in_calendar(CalendarSystem.COPTIC)

    assert excinfo.value.message == "Expected date to be in calendar Coptic, but found ISO."


def test_fields_are_measured_in_the_subject_calendar() -> None:
    coptic = MOMENT.with_calendar(CalendarSystem.COPTIC)

    should(coptic, "value").have_year(1736).and_.have_month(4).and_.have_day(22).and_.have_era(Era.ANNO_MARTYRUM)
    should(coptic, "value").not_be_in_calendar(CalendarSystem.ISO)


def test_local_date_time_time_fields() -> None:
    should(MOMENT, "value").have_hour(10).and_.have_clock_hour_of_half_day(10).and_.have_minute(15).and_.have_second(30)

    with pytest.raises(AssertionFailure) as excinfo:
        should(MOMENT, "value").have_hour(11)
    assert excinfo.value.message == "Expected value to have hour of day 11, but found 10."

    with pytest.raises(AssertionFailure) as excinfo:
        should(MOMENT, "value").have_tick_of_day(0)
    assert excinfo.value.message == "Expected value to have tick of day 0, but found 369,300,000,000."


def test_components_expose_which() -> None:
    assert should(MOMENT, "value").have_date(LocalDate(2020, 1, 1)).which == LocalDate(2020, 1, 1)
    assert should(MOMENT, "value").have_time_of_day(time(10, 15, 30)).which == LocalTime(10, 15, 30)


def test_have_date_is_calendar_sensitive() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(MOMENT, "value").have_date(LocalDate(2020, 1, 1).with_calendar(CalendarSystem.JULIAN))

    assert excinfo.value.message == "Expected value to have date 2019-12-19 (Julian), but found 2020-01-01."


def test_local_date_time_accepts_naive_datetime_with_calendar() -> None:
    should(MOMENT, "value").be(datetime(2020, 1, 1, 10, 15, 30))
    should(MOMENT.with_calendar(CalendarSystem.COPTIC), "value").be(
        datetime(2020, 1, 1, 10, 15, 30), calendar="coptic"
    )

    with pytest.raises(AssertionFailure) as excinfo:
        should(MOMENT, "value").be(datetime(2020, 1, 1, 10, 15, 30), calendar=CalendarSystem.COPTIC)

    assert excinfo.value.message == (
        "Expected value to be equal to 1736-04-22T10:15:30 (Coptic), but found 2020-01-01T10:15:30."
    )


def test_local_time_assertions() -> None:
    value = LocalTime(13, 5, 7, 123_456_789)

    should(value, "time").have_clock_hour_of_half_day(1).and_.have_millisecond(123).and_.have_tick_of_second(1_234_567)
    should(value, "time").have_nanosecond_of_second(123_456_789)
    should(LocalTime(13, 5, 7, 123_456_000), "time").be(time(13, 5, 7, 123_456))

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "time").have_nanosecond_of_day(1)
    assert excinfo.value.message == "Expected time to have nanosecond of day 1, but found 47,107,123,456,789."


def test_offset_date_time_phrases() -> None:
    value = OffsetDateTime(LocalDateTime.of(2020, 1, 1, 10, 0, 0, 500), Offset.from_hours(1))

    should(value, "value").have_tick_of_second(5).and_.have_nanosecond_of_second(500)

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "value").have_nanosecond_of_second(1)
    assert excinfo.value.message == "Expected value to have 1 nanoseconds within the second, but found 500."

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "value").have_year_of_era(2019)
    assert excinfo.value.message == "Expected value to have 2019 as the year within the era, but found 2020."

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "value").not_have_tick_of_day(360_000_000_005)
    assert excinfo.value.message == "Did not expect value to have 360,000,000,005 ticks within the day."


def test_offset_date_time_components() -> None:
    local = LocalDateTime.of(2020, 1, 1, 10)
    value = OffsetDateTime(local, Offset.from_hours(1))

    assert should(value, "value").have_offset(timedelta(hours=1)).which == Offset.from_hours(1)
    assert should(value, "value").have_local_date_time(local).which == local
    should(value, "value").be(datetime(2020, 1, 1, 10, tzinfo=timezone(timedelta(hours=1))))


def test_same_instant_with_other_offset_is_not_equal() -> None:
    value = OffsetDateTime(LocalDateTime.of(2020, 1, 1, 10), Offset.from_hours(1))

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "value").be(value.with_offset(Offset.from_hours(2)))

    assert excinfo.value.message == (
        "Expected value to be equal to 2020-01-01T11:00:00+02:00, but found 2020-01-01T10:00:00+01:00."
    )


def test_absent_offset_date_time_names_subject() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "value", OffsetDateTime).have_hour(1)

    assert excinfo.value.message == "Expected value to have hour of day 1, but value was <null>."


def test_offset_time_assertions() -> None:
    value = OffsetTime(LocalTime(10, 0), Offset.from_hours(1))

    assert should(value, "time").have_time_of_day(LocalTime(10, 0)).which == LocalTime(10, 0)
    should(value, "time").be(time(10, 0, tzinfo=timezone(timedelta(hours=1)))).and_.have_hour(10)

    with pytest.raises(AssertionFailure) as excinfo:
        should(value, "time").have_offset(Offset.from_hours(2))

    assert excinfo.value.message == "Expected time to have offset +02:00, but found +01:00."


def test_era_assertions_before_the_common_era() -> None:
    ides = LocalDate(-43, 3, 15)

    should(ides, "date").have_era(Era.BEFORE_COMMON).and_.have_year_of_era(44).and_.have_year(-43)

    with pytest.raises(AssertionFailure) as excinfo:
        should(ides, "date").have_era(Era.COMMON)
    assert excinfo.value.message == "Expected date to have era CE, but found BCE."
