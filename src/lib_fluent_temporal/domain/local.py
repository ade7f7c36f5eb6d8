"""Calendar-aware local dates and times without any offset or zone.

Purpose
-------
Provide the local value types that the offset and zoned types are built on.
A local value is a point *on a calendar*, not a point in time.

Contents
--------
* :class:`LocalDate` – year/month/day in a :class:`CalendarSystem`.
* :class:`LocalTime` – time of day with nanosecond precision.
* :class:`LocalDateTime` – a date combined with a time of day.
* ``DateFields`` / ``TimeFields`` – read-only field views reused by every type
  that carries a date or a time of day.

System Role
-----------
Equality includes the calendar. Ordering is only defined between values of the
same calendar; comparing across calendars raises :class:`ValueError` so callers
must project one side explicitly (see :meth:`LocalDate.with_calendar`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from .calendars import CalendarSystem, Era, IsoDayOfWeek
from .duration import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_TICK,
    format_fraction,
)


def format_date(year: int, month: int, day: int) -> str:
    """Render ``YYYY-MM-DD`` with a leading minus for proleptic years before 0.

    >>> format_date(-44, 3, 15)
    '-0044-03-15'
    """
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


def _calendar_suffix(calendar: CalendarSystem) -> str:
    return "" if calendar is CalendarSystem.ISO else f" ({calendar})"


def _require_same_calendar(left: CalendarSystem, right: CalendarSystem) -> None:
    if left is not right:
        raise ValueError(f"cannot compare values in the {left} and {right} calendars; project one side first")


class _CalendarOrdering:
    """Rich comparisons restricted to values of the same calendar."""

    __slots__ = ()

    def _ordering_key(self) -> tuple[int, ...]:
        raise NotImplementedError

    def _comparable(self, other: Any) -> bool:
        if type(other) is not type(self):
            return False
        _require_same_calendar(self.calendar, other.calendar)  # type: ignore[attr-defined]
        return True

    def __lt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._ordering_key() < other._ordering_key()

    def __le__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._ordering_key() <= other._ordering_key()

    def __gt__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._ordering_key() > other._ordering_key()

    def __ge__(self, other: Any) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._ordering_key() >= other._ordering_key()


@dataclass(slots=True, frozen=True, eq=True)
class LocalDate(_CalendarOrdering):
    """A date in a specific calendar system.

    Examples
    --------
    >>> iso = LocalDate(2020, 1, 1)
    >>> coptic = iso.with_calendar(CalendarSystem.COPTIC)
    >>> str(coptic)
    '1736-04-22 (Coptic)'
    >>> iso == coptic, iso.ordinal == coptic.ordinal
    (False, True)
    """

    year: int
    month: int
    day: int
    calendar: CalendarSystem = CalendarSystem.ISO
    ordinal: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ordinal", self.calendar.to_ordinal(self.year, self.month, self.day))

    @classmethod
    def from_ordinal(cls, ordinal: int, calendar: CalendarSystem = CalendarSystem.ISO) -> "LocalDate":
        """Build the date that falls on absolute day ``ordinal`` in ``calendar``."""
        year, month, day = calendar.from_ordinal(ordinal)
        return cls(year, month, day, calendar)

    @classmethod
    def from_date(cls, value: date, calendar: CalendarSystem = CalendarSystem.ISO) -> "LocalDate":
        """Project a stdlib (proleptic Gregorian) date into ``calendar``."""
        return cls.from_ordinal(value.toordinal(), calendar)

    def to_date(self) -> date:
        if self.ordinal < 1:
            raise ValueError(f"{self} precedes the range of datetime.date")
        return date.fromordinal(self.ordinal)

    def with_calendar(self, calendar: CalendarSystem) -> "LocalDate":
        return LocalDate.from_ordinal(self.ordinal, calendar)

    def plus_days(self, days: int) -> "LocalDate":
        return LocalDate.from_ordinal(self.ordinal + days, self.calendar)

    @property
    def day_of_week(self) -> IsoDayOfWeek:
        return IsoDayOfWeek.from_ordinal(self.ordinal)

    @property
    def day_of_year(self) -> int:
        return self.ordinal - self.calendar.to_ordinal(self.year, 1, 1) + 1

    @property
    def year_of_era(self) -> int:
        return self.calendar.year_of_era(self.year)

    @property
    def era(self) -> Era:
        return self.calendar.era_of(self.year)

    def _ordering_key(self) -> tuple[int, ...]:
        return (self.ordinal,)

    def __str__(self) -> str:
        return f"{format_date(self.year, self.month, self.day)}{_calendar_suffix(self.calendar)}"


@dataclass(slots=True, frozen=True, order=True)
class LocalTime:
    """A time of day, from midnight up to one nanosecond before the next midnight."""

    hour: int
    minute: int
    second: int = 0
    nanosecond_of_second: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.hour < 24:
            raise ValueError(f"hour {self.hour} is out of range 0..23")
        if not 0 <= self.minute < 60:
            raise ValueError(f"minute {self.minute} is out of range 0..59")
        if not 0 <= self.second < 60:
            raise ValueError(f"second {self.second} is out of range 0..59")
        if not 0 <= self.nanosecond_of_second < NANOS_PER_SECOND:
            raise ValueError(f"nanosecond {self.nanosecond_of_second} is out of range")

    @classmethod
    def from_nanosecond_of_day(cls, nanoseconds: int) -> "LocalTime":
        if not 0 <= nanoseconds < NANOS_PER_DAY:
            raise ValueError(f"nanosecond of day {nanoseconds} is out of range")
        hour, remainder = divmod(nanoseconds, NANOS_PER_HOUR)
        minute, remainder = divmod(remainder, NANOS_PER_MINUTE)
        second, nanosecond = divmod(remainder, NANOS_PER_SECOND)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_time(cls, value: time) -> "LocalTime":
        return cls(value.hour, value.minute, value.second, value.microsecond * NANOS_PER_MICROSECOND)

    @property
    def clock_hour_of_half_day(self) -> int:
        hour_of_half_day = self.hour % 12
        return 12 if hour_of_half_day == 0 else hour_of_half_day

    @property
    def millisecond(self) -> int:
        return self.nanosecond_of_second // NANOS_PER_MILLISECOND

    @property
    def tick_of_second(self) -> int:
        return self.nanosecond_of_second // NANOS_PER_TICK

    @property
    def nanosecond_of_day(self) -> int:
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond_of_second
        )

    @property
    def tick_of_day(self) -> int:
        return self.nanosecond_of_day // NANOS_PER_TICK

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second, self.nanosecond_of_second // NANOS_PER_MICROSECOND)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}{format_fraction(self.nanosecond_of_second)}"


LocalTime.MIDNIGHT = LocalTime(0, 0)  # type: ignore[attr-defined]


class DateFields:
    """Date field views for types exposing a ``date`` attribute."""

    __slots__ = ()

    @property
    def calendar(self) -> CalendarSystem:
        return self.date.calendar  # type: ignore[attr-defined]

    @property
    def year(self) -> int:
        return self.date.year  # type: ignore[attr-defined]

    @property
    def month(self) -> int:
        return self.date.month  # type: ignore[attr-defined]

    @property
    def day(self) -> int:
        return self.date.day  # type: ignore[attr-defined]

    @property
    def day_of_week(self) -> IsoDayOfWeek:
        return self.date.day_of_week  # type: ignore[attr-defined]

    @property
    def day_of_year(self) -> int:
        return self.date.day_of_year  # type: ignore[attr-defined]

    @property
    def year_of_era(self) -> int:
        return self.date.year_of_era  # type: ignore[attr-defined]

    @property
    def era(self) -> Era:
        return self.date.era  # type: ignore[attr-defined]


class TimeFields:
    """Time-of-day field views for types exposing a ``time_of_day`` attribute."""

    __slots__ = ()

    @property
    def hour(self) -> int:
        return self.time_of_day.hour  # type: ignore[attr-defined]

    @property
    def clock_hour_of_half_day(self) -> int:
        return self.time_of_day.clock_hour_of_half_day  # type: ignore[attr-defined]

    @property
    def minute(self) -> int:
        return self.time_of_day.minute  # type: ignore[attr-defined]

    @property
    def second(self) -> int:
        return self.time_of_day.second  # type: ignore[attr-defined]

    @property
    def millisecond(self) -> int:
        return self.time_of_day.millisecond  # type: ignore[attr-defined]

    @property
    def tick_of_second(self) -> int:
        return self.time_of_day.tick_of_second  # type: ignore[attr-defined]

    @property
    def tick_of_day(self) -> int:
        return self.time_of_day.tick_of_day  # type: ignore[attr-defined]

    @property
    def nanosecond_of_second(self) -> int:
        return self.time_of_day.nanosecond_of_second  # type: ignore[attr-defined]

    @property
    def nanosecond_of_day(self) -> int:
        return self.time_of_day.nanosecond_of_day  # type: ignore[attr-defined]


@dataclass(slots=True, frozen=True)
class LocalDateTime(DateFields, TimeFields, _CalendarOrdering):
    """A date and time of day in a specific calendar, with no offset or zone."""

    date: LocalDate
    time_of_day: LocalTime = LocalTime(0, 0)

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        calendar: CalendarSystem = CalendarSystem.ISO,
    ) -> "LocalDateTime":
        """Build a value from its fields; ``nanosecond`` is the nanosecond of the second."""
        return cls(LocalDate(year, month, day, calendar), LocalTime(hour, minute, second, nanosecond))

    @classmethod
    def from_datetime(cls, value: datetime, calendar: CalendarSystem = CalendarSystem.ISO) -> "LocalDateTime":
        """Use the wall-clock fields of ``value``; any ``tzinfo`` is ignored."""
        return cls(LocalDate.from_date(value.date(), calendar), LocalTime.from_time(value.time()))

    @classmethod
    def from_day_nanoseconds(
        cls, ordinal: int, nanosecond_of_day: int, calendar: CalendarSystem = CalendarSystem.ISO
    ) -> "LocalDateTime":
        days, nanos = divmod(nanosecond_of_day, NANOS_PER_DAY)
        return cls(LocalDate.from_ordinal(ordinal + days, calendar), LocalTime.from_nanosecond_of_day(nanos))

    def to_naive_datetime(self) -> datetime:
        """Return the ISO projection as a naive :class:`~datetime.datetime` (microsecond precision)."""
        return datetime.combine(self.date.to_date(), self.time_of_day.to_time())

    @classmethod
    def combine(cls, date_value: LocalDate, time_value: LocalTime = LocalTime(0, 0)) -> "LocalDateTime":
        return cls(date_value, time_value)

    def at_offset(self, offset: Any) -> Any:
        """Attach ``offset``, returning an :class:`~lib_fluent_temporal.domain.offset_values.OffsetDateTime`."""
        from .offset_values import OffsetDateTime

        return OffsetDateTime(self, offset)

    def with_calendar(self, calendar: CalendarSystem) -> "LocalDateTime":
        return LocalDateTime(self.date.with_calendar(calendar), self.time_of_day)

    def plus_nanoseconds(self, nanoseconds: int) -> "LocalDateTime":
        return LocalDateTime.from_day_nanoseconds(
            self.date.ordinal, self.time_of_day.nanosecond_of_day + nanoseconds, self.calendar
        )

    def _ordering_key(self) -> tuple[int, ...]:
        return (self.date.ordinal, self.time_of_day.nanosecond_of_day)

    def __str__(self) -> str:
        return f"{format_date(self.year, self.month, self.day)}T{self.time_of_day}{_calendar_suffix(self.calendar)}"


__all__ = ["DateFields", "LocalDate", "LocalDateTime", "LocalTime", "TimeFields", "format_date"]
