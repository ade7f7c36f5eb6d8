"""Local values paired with a fixed UTC offset.

Contents
--------
* :class:`OffsetTime` – a time of day with an offset.
* :class:`OffsetDateTime` – a calendar date and time with an offset; maps to
  exactly one :class:`Instant`.

Equality compares the local part (calendar included) and the offset, so two
values for the same instant with different offsets are *not* equal. Ordering
assertions use :meth:`OffsetDateTime.to_instant` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timezone

from .calendars import CalendarSystem
from .duration import NANOS_PER_SECOND
from .instant import Instant
from .local import DateFields, LocalDate, LocalDateTime, LocalTime, TimeFields, format_date
from .offset import Offset


@dataclass(slots=True, frozen=True)
class OffsetTime(TimeFields):
    """A time of day together with the offset it was observed at."""

    time_of_day: LocalTime
    offset: Offset = Offset(0)

    @classmethod
    def from_time(cls, value: time) -> "OffsetTime":
        """Convert an aware :class:`datetime.time`; its ``utcoffset()`` becomes the offset."""
        utcoffset = value.utcoffset()
        if utcoffset is None:
            raise ValueError("naive time has no offset; attach a tzinfo first")
        return cls(LocalTime.from_time(value), Offset.from_timedelta(utcoffset))

    @property
    def offset_nanosecond_of_day(self) -> int:
        """Nanoseconds from the offset's midnight, shifted to UTC (may leave 0..day)."""
        return self.time_of_day.nanosecond_of_day - self.offset.seconds * NANOS_PER_SECOND

    def __str__(self) -> str:
        return f"{self.time_of_day}{self.offset}"


@dataclass(slots=True, frozen=True)
class OffsetDateTime(DateFields, TimeFields):
    """A local date and time plus the offset that pins it to the time line.

    Examples
    --------
    >>> value = OffsetDateTime(LocalDateTime.of(2020, 1, 1, 10), Offset.from_hours(1))
    >>> str(value), str(value.to_instant())
    ('2020-01-01T10:00:00+01:00', '2020-01-01T09:00:00Z')
    """

    local_date_time: LocalDateTime
    offset: Offset = Offset(0)

    @classmethod
    def from_datetime(cls, value: datetime, calendar: CalendarSystem = CalendarSystem.ISO) -> "OffsetDateTime":
        """Convert an aware :class:`~datetime.datetime`, keeping its wall clock and offset."""
        utcoffset = value.utcoffset()
        if utcoffset is None:
            raise ValueError("naive datetime has no offset; attach a tzinfo first")
        return cls(LocalDateTime.from_datetime(value, calendar), Offset.from_timedelta(utcoffset))

    @classmethod
    def from_instant(
        cls, instant: Instant, offset: Offset, calendar: CalendarSystem = CalendarSystem.ISO
    ) -> "OffsetDateTime":
        shifted = Instant(instant.nanoseconds_since_epoch + offset.nanoseconds)
        return cls(shifted.to_local_utc(calendar), offset)

    @property
    def date(self) -> LocalDate:
        return self.local_date_time.date

    @property
    def time_of_day(self) -> LocalTime:
        return self.local_date_time.time_of_day

    def to_instant(self) -> Instant:
        local = Instant.from_local_utc(self.local_date_time)
        return Instant(local.nanoseconds_since_epoch - self.offset.nanoseconds)

    def to_offset_time(self) -> OffsetTime:
        return OffsetTime(self.time_of_day, self.offset)

    def to_datetime(self) -> datetime:
        """Return an aware :class:`~datetime.datetime` with a fixed-offset tzinfo."""
        naive = self.local_date_time.to_naive_datetime()
        return naive.replace(tzinfo=timezone(self.offset.to_timedelta()))

    def with_offset(self, offset: Offset) -> "OffsetDateTime":
        """Return the same instant seen at ``offset``."""
        return OffsetDateTime.from_instant(self.to_instant(), offset, self.calendar)

    def __str__(self) -> str:
        text = f"{format_date(self.year, self.month, self.day)}T{self.time_of_day}{self.offset}"
        if self.calendar is not CalendarSystem.ISO:
            text += f" ({self.calendar})"
        return text


__all__ = ["OffsetDateTime", "OffsetTime"]
