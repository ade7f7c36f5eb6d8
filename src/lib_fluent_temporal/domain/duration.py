"""Fixed-length elapsed time with nanosecond resolution.

Purpose
-------
Model an absolute amount of time (no calendar involved) so periods, instants
and offsets have a common currency for arithmetic and comparison.

Contents
--------
* Unit constants (``NANOS_PER_*``) shared by the other value types.
* :class:`Duration` – signed nanosecond count with component and total views.

System Role
-----------
``Duration`` is the target of :meth:`Period.to_duration` and the precision
argument of the proximity assertions (``be_close_to``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

NANOS_PER_TICK = 100
NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR
NANOS_PER_WEEK = 7 * NANOS_PER_DAY
TICKS_PER_SECOND = NANOS_PER_SECOND // NANOS_PER_TICK


def format_fraction(nanoseconds: int) -> str:
    """Return ``.fffffffff`` without trailing zeros, or ``""`` for zero."""
    if not nanoseconds:
        return ""
    return "." + f"{nanoseconds:09d}".rstrip("0")


@dataclass(slots=True, frozen=True, order=True)
class Duration:
    """Signed elapsed time measured in nanoseconds.

    Components (``days``, ``hours`` …) are truncated towards zero and carry the
    sign of the whole duration; totals are floating point.

    Examples
    --------
    >>> str(Duration.from_hours(26) + Duration.from_milliseconds(5))
    '1:02:00:00.005'
    >>> Duration.from_minutes(-90).hours
    -1
    """

    nanoseconds: int = 0

    @classmethod
    def from_days(cls, days: int) -> "Duration":
        return cls(days * NANOS_PER_DAY)

    @classmethod
    def from_hours(cls, hours: int) -> "Duration":
        return cls(hours * NANOS_PER_HOUR)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Duration":
        return cls(minutes * NANOS_PER_MINUTE)

    @classmethod
    def from_seconds(cls, seconds: int) -> "Duration":
        return cls(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        return cls(milliseconds * NANOS_PER_MILLISECOND)

    @classmethod
    def from_ticks(cls, ticks: int) -> "Duration":
        return cls(ticks * NANOS_PER_TICK)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "Duration":
        return cls(nanoseconds)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        """Convert a stdlib :class:`~datetime.timedelta` without losing microseconds."""
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        return cls(micros * NANOS_PER_MICROSECOND)

    def to_timedelta(self) -> timedelta:
        """Return the duration as a :class:`~datetime.timedelta` (truncated to microseconds)."""
        sign = -1 if self.nanoseconds < 0 else 1
        return timedelta(microseconds=sign * (abs(self.nanoseconds) // NANOS_PER_MICROSECOND))

    def _split(self) -> tuple[int, int, int]:
        sign = -1 if self.nanoseconds < 0 else 1
        days, remainder = divmod(abs(self.nanoseconds), NANOS_PER_DAY)
        return sign, days, remainder

    @property
    def days(self) -> int:
        sign, days, _ = self._split()
        return sign * days

    @property
    def hours(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder // NANOS_PER_HOUR)

    @property
    def minutes(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder // NANOS_PER_MINUTE % 60)

    @property
    def seconds(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder // NANOS_PER_SECOND % 60)

    @property
    def milliseconds(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder // NANOS_PER_MILLISECOND % 1000)

    @property
    def subsecond_nanoseconds(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder % NANOS_PER_SECOND)

    @property
    def subsecond_ticks(self) -> int:
        sign, _, remainder = self._split()
        return sign * (remainder % NANOS_PER_SECOND // NANOS_PER_TICK)

    @property
    def nanosecond_of_day(self) -> int:
        sign, _, remainder = self._split()
        return sign * remainder

    @property
    def bcl_compatible_ticks(self) -> int:
        sign = -1 if self.nanoseconds < 0 else 1
        return sign * (abs(self.nanoseconds) // NANOS_PER_TICK)

    @property
    def total_days(self) -> float:
        return self.nanoseconds / NANOS_PER_DAY

    @property
    def total_hours(self) -> float:
        return self.nanoseconds / NANOS_PER_HOUR

    @property
    def total_minutes(self) -> float:
        return self.nanoseconds / NANOS_PER_MINUTE

    @property
    def total_seconds(self) -> float:
        return self.nanoseconds / NANOS_PER_SECOND

    @property
    def total_milliseconds(self) -> float:
        return self.nanoseconds / NANOS_PER_MILLISECOND

    @property
    def total_ticks(self) -> float:
        return self.nanoseconds / NANOS_PER_TICK

    @property
    def total_nanoseconds(self) -> float:
        return float(self.nanoseconds)

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds - other.nanoseconds)

    def __neg__(self) -> "Duration":
        return Duration(-self.nanoseconds)

    def __abs__(self) -> "Duration":
        return Duration(abs(self.nanoseconds))

    def __str__(self) -> str:
        sign, days, remainder = self._split()
        hours, remainder = divmod(remainder, NANOS_PER_HOUR)
        minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
        seconds, fraction = divmod(remainder, NANOS_PER_SECOND)
        prefix = "-" if sign < 0 else ""
        return f"{prefix}{days}:{hours:02d}:{minutes:02d}:{seconds:02d}{format_fraction(fraction)}"


Duration.ZERO = Duration(0)  # type: ignore[attr-defined]


__all__ = [
    "Duration",
    "NANOS_PER_DAY",
    "NANOS_PER_HOUR",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "NANOS_PER_TICK",
    "NANOS_PER_WEEK",
    "TICKS_PER_SECOND",
    "format_fraction",
]
