"""Family adapters implementing :class:`~lib_fluent_temporal.application.ports.ValueFamily`.

Purpose
-------
Encode, once per value family, the equality and ordering rules that the
generic assertion engine applies.

Contents
--------
* ``*Family`` classes for the ten supported value families.
* :data:`FAMILIES` – one shared instance per family, in dispatch order.

System Role
-----------
Equality for date-bearing families includes the calendar. Ordering keys map
values onto an absolute axis (day number or instant) so that comparison
assertions normalise across calendars explicitly instead of failing on them.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Any

from lib_fluent_temporal.application.ports import AbsentStyle
from lib_fluent_temporal.domain import (
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Offset,
    OffsetDateTime,
    OffsetTime,
    Period,
    ZonedDateTime,
)

from ._formatting import render


class _Family:
    """Defaults shared by the concrete families."""

    identifier = "value"
    value_type: type = object
    absent_style = AbsentStyle.NAMED

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.value_type)

    def coerce(self, expected: Any) -> Any:
        if expected is None or isinstance(expected, self.value_type):
            return expected
        converted = self._convert(expected)
        if converted is None:
            raise TypeError(f"cannot compare a {self.identifier} with {type(expected).__name__}")
        return converted

    def _convert(self, expected: Any) -> Any:
        return None

    def equals(self, actual: Any, expected: Any) -> bool:
        return actual == expected

    def ordering_key(self, value: Any) -> Any:
        return value

    def render(self, value: Any) -> str:
        return render(value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identifier}>"


class InstantFamily(_Family):
    identifier = "Instant"
    value_type = Instant

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, datetime) and expected.tzinfo is not None:
            return Instant.from_datetime(expected)
        return None

    def ordering_key(self, value: Instant) -> int:
        return value.nanoseconds_since_epoch


class LocalDateFamily(_Family):
    identifier = "LocalDate"
    value_type = LocalDate

    def ordering_key(self, value: LocalDate) -> int:
        return value.ordinal


class LocalDateTimeFamily(_Family):
    identifier = "LocalDateTime"
    value_type = LocalDateTime

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, datetime) and expected.tzinfo is None:
            return LocalDateTime.from_datetime(expected)
        return None

    def ordering_key(self, value: LocalDateTime) -> tuple[int, int]:
        return value.date.ordinal, value.nanosecond_of_day


class LocalTimeFamily(_Family):
    identifier = "LocalTime"
    value_type = LocalTime

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, time) and expected.tzinfo is None:
            return LocalTime.from_time(expected)
        return None

    def ordering_key(self, value: LocalTime) -> int:
        return value.nanosecond_of_day


class OffsetTimeFamily(_Family):
    identifier = "OffsetTime"
    value_type = OffsetTime

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, time) and expected.utcoffset() is not None:
            return OffsetTime.from_time(expected)
        return None

    def ordering_key(self, value: OffsetTime) -> int:
        return value.offset_nanosecond_of_day


class OffsetDateTimeFamily(_Family):
    identifier = "OffsetDateTime"
    value_type = OffsetDateTime

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, datetime) and expected.utcoffset() is not None:
            return OffsetDateTime.from_datetime(expected)
        return None

    def ordering_key(self, value: OffsetDateTime) -> int:
        return value.to_instant().nanoseconds_since_epoch


class ZonedDateTimeFamily(_Family):
    identifier = "ZonedDateTime"
    value_type = ZonedDateTime

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, datetime) and expected.utcoffset() is not None:
            return ZonedDateTime.from_datetime(expected)
        return None

    def ordering_key(self, value: ZonedDateTime) -> int:
        return value.to_instant().nanoseconds_since_epoch


class PeriodFamily(_Family):
    """Periods compare by years, months and the fixed length of the rest.

    A :class:`Duration` (or :class:`~datetime.timedelta`) expectation compares
    against the period's absolute length; periods with years or months never
    equal a duration.
    """

    identifier = "Period"
    value_type = Period

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, Duration):
            return expected
        if isinstance(expected, timedelta):
            return Duration.from_timedelta(expected)
        return None

    def equals(self, actual: Period, expected: Period | Duration) -> bool:
        if isinstance(expected, Duration):
            return not actual.has_variable_length and actual.to_duration() == expected
        return (actual.years, actual.months, actual.fixed_nanoseconds()) == (
            expected.years,
            expected.months,
            expected.fixed_nanoseconds(),
        )

    def ordering_key(self, value: Period) -> Any:
        raise TypeError("periods have no total order; compare their durations instead")


class DurationFamily(_Family):
    identifier = "Duration"
    value_type = Duration
    absent_style = AbsentStyle.FOUND

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, timedelta):
            return Duration.from_timedelta(expected)
        return None

    def ordering_key(self, value: Duration) -> int:
        return value.nanoseconds


class OffsetFamily(_Family):
    identifier = "Offset"
    value_type = Offset
    absent_style = AbsentStyle.FOUND

    def _convert(self, expected: Any) -> Any:
        if isinstance(expected, timedelta):
            return Offset.from_timedelta(expected)
        return None

    def ordering_key(self, value: Offset) -> int:
        return value.seconds


INSTANT = InstantFamily()
LOCAL_DATE = LocalDateFamily()
LOCAL_DATE_TIME = LocalDateTimeFamily()
LOCAL_TIME = LocalTimeFamily()
OFFSET_TIME = OffsetTimeFamily()
OFFSET_DATE_TIME = OffsetDateTimeFamily()
ZONED_DATE_TIME = ZonedDateTimeFamily()
PERIOD = PeriodFamily()
DURATION = DurationFamily()
OFFSET = OffsetFamily()

FAMILIES = (
    INSTANT,
    LOCAL_DATE,
    LOCAL_DATE_TIME,
    LOCAL_TIME,
    OFFSET_TIME,
    OFFSET_DATE_TIME,
    ZONED_DATE_TIME,
    PERIOD,
    DURATION,
    OFFSET,
)


__all__ = [
    "DURATION",
    "DurationFamily",
    "FAMILIES",
    "INSTANT",
    "InstantFamily",
    "LOCAL_DATE",
    "LOCAL_DATE_TIME",
    "LOCAL_TIME",
    "LocalDateFamily",
    "LocalDateTimeFamily",
    "LocalTimeFamily",
    "OFFSET",
    "OFFSET_DATE_TIME",
    "OFFSET_TIME",
    "OffsetDateTimeFamily",
    "OffsetFamily",
    "OffsetTimeFamily",
    "PERIOD",
    "PeriodFamily",
    "ZONED_DATE_TIME",
    "ZonedDateTimeFamily",
]
