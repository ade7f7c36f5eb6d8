"""Field assertions shared by the date- and time-bearing families."""

from __future__ import annotations

from datetime import time, timedelta
from typing import Any

from lib_fluent_temporal.adapters._formatting import as_formatted
from lib_fluent_temporal.domain import CalendarSystem, LocalTime, Offset

from ._base import field_assertion


def as_calendar(value: Any) -> CalendarSystem:
    """Accept a :class:`CalendarSystem` or its id."""
    if isinstance(value, str):
        return CalendarSystem.for_id(value)
    return value


def as_offset(value: Any) -> Offset:
    """Accept an :class:`Offset` or a whole-second :class:`~datetime.timedelta`."""
    if isinstance(value, timedelta):
        return Offset.from_timedelta(value)
    return value


def as_local_time(value: Any) -> LocalTime:
    if isinstance(value, time):
        return LocalTime.from_time(value)
    return value


class CalendarAssertions:
    """``be_in_calendar`` for every type that carries a calendar."""

    be_in_calendar = field_assertion("calendar", "be in calendar {0}", coerce=as_calendar, which=True)
    not_be_in_calendar = field_assertion("calendar", "be in calendar {0}", coerce=as_calendar, negated=True)


class DateFieldAssertions(CalendarAssertions):
    """Date fields, measured in the subject's own calendar."""

    have_day = field_assertion("day", "have day {0}")
    not_have_day = field_assertion("day", "have day {0}", negated=True)
    have_day_of_week = field_assertion("day_of_week", "have day of week {0}")
    not_have_day_of_week = field_assertion("day_of_week", "have day of week {0}", negated=True)
    have_day_of_year = field_assertion("day_of_year", "have day of year {0}")
    not_have_day_of_year = field_assertion("day_of_year", "have day of year {0}", negated=True)
    have_month = field_assertion("month", "have month {0}")
    not_have_month = field_assertion("month", "have month {0}", negated=True)
    have_year = field_assertion("year", "have year {0}")
    not_have_year = field_assertion("year", "have year {0}", negated=True)
    have_year_of_era = field_assertion("year_of_era", "have year of era {0}")
    not_have_year_of_era = field_assertion("year_of_era", "have year of era {0}", negated=True)
    have_era = field_assertion("era", "have era {0}")
    not_have_era = field_assertion("era", "have era {0}", negated=True)


class TimeFieldAssertions:
    """Time-of-day fields; day-wide counts are long and render grouped."""

    have_hour = field_assertion("hour", "have hour of day {0}")
    not_have_hour = field_assertion("hour", "have hour of day {0}", negated=True)
    have_clock_hour_of_half_day = field_assertion("clock_hour_of_half_day", "have clock hour of the half-day of {0}")
    not_have_clock_hour_of_half_day = field_assertion(
        "clock_hour_of_half_day", "have clock hour of the half-day of {0}", negated=True
    )
    have_minute = field_assertion("minute", "have minute {0}")
    not_have_minute = field_assertion("minute", "have minute {0}", negated=True)
    have_second = field_assertion("second", "have second {0}")
    not_have_second = field_assertion("second", "have second {0}", negated=True)
    have_millisecond = field_assertion("millisecond", "have millisecond {0}")
    not_have_millisecond = field_assertion("millisecond", "have millisecond {0}", negated=True)
    have_tick_of_second = field_assertion("tick_of_second", "have tick of second {0}")
    not_have_tick_of_second = field_assertion("tick_of_second", "have tick of second {0}", negated=True)
    have_tick_of_day = field_assertion("tick_of_day", "have tick of day {0}", formatter=as_formatted)
    not_have_tick_of_day = field_assertion("tick_of_day", "have tick of day {0}", formatter=as_formatted, negated=True)
    have_nanosecond_of_second = field_assertion("nanosecond_of_second", "have nanosecond of second {0}")
    not_have_nanosecond_of_second = field_assertion(
        "nanosecond_of_second", "have nanosecond of second {0}", negated=True
    )
    have_nanosecond_of_day = field_assertion("nanosecond_of_day", "have nanosecond of day {0}", formatter=as_formatted)
    not_have_nanosecond_of_day = field_assertion(
        "nanosecond_of_day", "have nanosecond of day {0}", formatter=as_formatted, negated=True
    )


class ComponentAssertions:
    """Assertions on the date and time-of-day components of a date-time."""

    have_date = field_assertion("date", "have date {0}", which=True)
    not_have_date = field_assertion("date", "have date {0}", negated=True)
    have_time_of_day = field_assertion("time_of_day", "have time of day {0}", coerce=as_local_time, which=True)
    not_have_time_of_day = field_assertion("time_of_day", "have time of day {0}", coerce=as_local_time, negated=True)


class OffsetComponentAssertions:
    have_offset = field_assertion("offset", "have offset {0}", coerce=as_offset, which=True)
    not_have_offset = field_assertion("offset", "have offset {0}", coerce=as_offset, negated=True)


class LocalDateTimeComponentAssertions:
    have_local_date_time = field_assertion("local_date_time", "have local date time {0}", which=True)
    not_have_local_date_time = field_assertion("local_date_time", "have local date time {0}", negated=True)


__all__ = [
    "CalendarAssertions",
    "ComponentAssertions",
    "DateFieldAssertions",
    "LocalDateTimeComponentAssertions",
    "OffsetComponentAssertions",
    "TimeFieldAssertions",
    "as_calendar",
    "as_local_time",
    "as_offset",
]
