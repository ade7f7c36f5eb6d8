"""Points on the global time line, independent of calendar and zone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from .calendars import CalendarSystem
from .duration import NANOS_PER_DAY, NANOS_PER_MICROSECOND, NANOS_PER_SECOND, Duration
from .local import LocalDateTime

_UNIX_EPOCH_ORDINAL = 719163  # date(1970, 1, 1).toordinal()


@dataclass(slots=True, frozen=True, order=True)
class Instant:
    """Nanoseconds since the Unix epoch (1970-01-01T00:00:00Z).

    Examples
    --------
    >>> str(Instant.from_utc(2020, 1, 1, 10, 15))
    '2020-01-01T10:15:00Z'
    >>> Instant.from_unix_time_seconds(60) - Instant.UNIX_EPOCH == Duration.from_minutes(1)
    True
    """

    nanoseconds_since_epoch: int = 0

    @classmethod
    def from_utc(
        cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> "Instant":
        """Build the instant whose UTC wall clock shows the given ISO fields."""
        return cls.from_local_utc(LocalDateTime.of(year, month, day, hour, minute, second, nanosecond))

    @classmethod
    def from_local_utc(cls, local: LocalDateTime) -> "Instant":
        days = local.date.ordinal - _UNIX_EPOCH_ORDINAL
        return cls(days * NANOS_PER_DAY + local.time_of_day.nanosecond_of_day)

    @classmethod
    def from_unix_time_seconds(cls, seconds: int) -> "Instant":
        return cls(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_datetime(cls, value: datetime) -> "Instant":
        """Convert an aware :class:`~datetime.datetime`.

        Raises
        ------
        ValueError
            If ``value`` is naive; a naive value has no position on the time line.
        """
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("naive datetime has no position on the time line; attach a tzinfo first")
        utc = value.astimezone(timezone.utc).replace(tzinfo=None)
        return cls.from_local_utc(LocalDateTime.from_datetime(utc))

    def to_local_utc(self, calendar: CalendarSystem = CalendarSystem.ISO) -> LocalDateTime:
        days, nanos = divmod(self.nanoseconds_since_epoch, NANOS_PER_DAY)
        return LocalDateTime.from_day_nanoseconds(_UNIX_EPOCH_ORDINAL + days, nanos, calendar)

    def to_datetime_utc(self) -> datetime:
        """Return an aware UTC datetime, truncated to microseconds."""
        return self.to_local_utc().to_naive_datetime().replace(tzinfo=timezone.utc)

    @property
    def unix_time_seconds(self) -> int:
        return self.nanoseconds_since_epoch // NANOS_PER_SECOND

    @property
    def unix_time_microseconds(self) -> int:
        return self.nanoseconds_since_epoch // NANOS_PER_MICROSECOND

    def plus(self, duration: Duration) -> "Instant":
        return Instant(self.nanoseconds_since_epoch + duration.nanoseconds)

    def __add__(self, other: object) -> "Instant":
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> "Instant | Duration":
        if isinstance(other, Instant):
            return Duration(self.nanoseconds_since_epoch - other.nanoseconds_since_epoch)
        if isinstance(other, Duration):
            return Instant(self.nanoseconds_since_epoch - other.nanoseconds)
        return NotImplemented

    def __str__(self) -> str:
        local = self.to_local_utc()
        return f"{local.date}T{local.time_of_day}Z"


Instant.UNIX_EPOCH = Instant(0)  # type: ignore[attr-defined]


__all__ = ["Instant"]
