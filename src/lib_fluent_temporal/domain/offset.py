"""UTC offsets expressed in whole seconds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .duration import NANOS_PER_MILLISECOND, NANOS_PER_SECOND, NANOS_PER_TICK, Duration

_MAX_SECONDS = 18 * 3600


@dataclass(slots=True, frozen=True, order=True)
class Offset:
    """Difference between local time and UTC, limited to ±18 hours.

    Examples
    --------
    >>> str(Offset.from_hours_and_minutes(5, 30))
    '+05:30'
    >>> str(Offset.from_seconds(-3661))
    '-01:01:01'
    """

    seconds: int = 0

    def __post_init__(self) -> None:
        if not -_MAX_SECONDS <= self.seconds <= _MAX_SECONDS:
            raise ValueError(f"offset of {self.seconds} seconds is outside ±18 hours")

    @classmethod
    def from_seconds(cls, seconds: int) -> "Offset":
        return cls(seconds)

    @classmethod
    def from_hours(cls, hours: int) -> "Offset":
        return cls(hours * 3600)

    @classmethod
    def from_hours_and_minutes(cls, hours: int, minutes: int) -> "Offset":
        sign = -1 if hours < 0 or minutes < 0 else 1
        return cls(sign * (abs(hours) * 3600 + abs(minutes) * 60))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Offset":
        """Convert a :class:`~datetime.timedelta` holding whole seconds."""
        if value.microseconds:
            raise ValueError(f"offset {value!r} is not a whole number of seconds")
        return cls(value.days * 86_400 + value.seconds)

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def to_duration(self) -> Duration:
        return Duration.from_seconds(self.seconds)

    @property
    def milliseconds(self) -> int:
        return self.seconds * (NANOS_PER_SECOND // NANOS_PER_MILLISECOND)

    @property
    def ticks(self) -> int:
        return self.seconds * (NANOS_PER_SECOND // NANOS_PER_TICK)

    @property
    def nanoseconds(self) -> int:
        return self.seconds * NANOS_PER_SECOND

    def __add__(self, other: object) -> "Offset":
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.seconds + other.seconds)

    def __sub__(self, other: object) -> "Offset":
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.seconds - other.seconds)

    def __str__(self) -> str:
        sign = "-" if self.seconds < 0 else "+"
        hours, remainder = divmod(abs(self.seconds), 3600)
        minutes, seconds = divmod(remainder, 60)
        text = f"{sign}{hours:02d}:{minutes:02d}"
        if seconds:
            text += f":{seconds:02d}"
        return text


Offset.ZERO = Offset(0)  # type: ignore[attr-defined]


__all__ = ["Offset"]
