"""Calendar-relative amounts of time.

Purpose
-------
Represent "3 months and 2 days" style quantities whose absolute length depends
on where they are applied. Field counts are kept exactly as supplied; nothing
is normalised unless :meth:`Period.normalize` is called.

Contents
--------
* :class:`Period` – immutable set of ten unit counts.

System Role
-----------
Field assertions read the raw counts; equality assertions compare the
fixed-length part through :meth:`Period.fixed_nanoseconds` and
:meth:`Period.to_duration`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from .duration import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_TICK,
    NANOS_PER_WEEK,
    Duration,
)

_DATE_UNITS = ("years", "months", "weeks", "days")
_TIME_UNITS = ("hours", "minutes", "seconds", "milliseconds", "ticks", "nanoseconds")

_UNIT_NANOS = {
    "weeks": NANOS_PER_WEEK,
    "days": NANOS_PER_DAY,
    "hours": NANOS_PER_HOUR,
    "minutes": NANOS_PER_MINUTE,
    "seconds": NANOS_PER_SECOND,
    "milliseconds": NANOS_PER_MILLISECOND,
    "ticks": NANOS_PER_TICK,
    "nanoseconds": 1,
}

# Suffixes of the round-trip text form, in output order.
_DATE_DESIGNATORS = (("years", "Y"), ("months", "M"), ("weeks", "W"), ("days", "D"))
_TIME_DESIGNATORS = (
    ("hours", "H"),
    ("minutes", "M"),
    ("seconds", "S"),
    ("milliseconds", "s"),
    ("ticks", "t"),
    ("nanoseconds", "n"),
)


@dataclass(slots=True, frozen=True)
class Period:
    """A period of time expressed in calendar and clock units.

    ``years``, ``months``, ``weeks`` and ``days`` are ints; the time units are
    unbounded ("long") counts. Python equality compares the raw fields.

    Examples
    --------
    >>> str(Period(years=1, days=3, hours=4, milliseconds=5))
    'P1Y3DT4H5s'
    >>> Period.from_hours(24).to_duration() == Duration.from_days(1)
    True
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    ticks: int = 0
    nanoseconds: int = 0

    @classmethod
    def from_years(cls, years: int) -> "Period":
        return cls(years=years)

    @classmethod
    def from_months(cls, months: int) -> "Period":
        return cls(months=months)

    @classmethod
    def from_weeks(cls, weeks: int) -> "Period":
        return cls(weeks=weeks)

    @classmethod
    def from_days(cls, days: int) -> "Period":
        return cls(days=days)

    @classmethod
    def from_hours(cls, hours: int) -> "Period":
        return cls(hours=hours)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Period":
        return cls(minutes=minutes)

    @classmethod
    def from_seconds(cls, seconds: int) -> "Period":
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Period":
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_ticks(cls, ticks: int) -> "Period":
        return cls(ticks=ticks)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> "Period":
        return cls(nanoseconds=nanoseconds)

    @property
    def has_date_component(self) -> bool:
        return any(getattr(self, name) for name in _DATE_UNITS)

    @property
    def has_time_component(self) -> bool:
        return any(getattr(self, name) for name in _TIME_UNITS)

    @property
    def has_variable_length(self) -> bool:
        """Return ``True`` when years or months make the absolute length context-dependent."""
        return bool(self.years or self.months)

    def fixed_nanoseconds(self) -> int:
        """Return the length of every unit except years and months, in nanoseconds."""
        return sum(getattr(self, name) * nanos for name, nanos in _UNIT_NANOS.items())

    def to_duration(self) -> Duration:
        """Return the absolute length, treating a day as 24 hours.

        Raises
        ------
        ValueError
            If the period contains years or months.
        """
        if self.has_variable_length:
            raise ValueError(f"cannot convert period {self} with years or months to a duration")
        return Duration(self.fixed_nanoseconds())

    def normalize(self) -> "Period":
        """Fold weeks into days and carry the time units up to hours.

        Years, months and days stay as they are because their relationship to
        the smaller units depends on the calendar.
        """
        time = sum(getattr(self, name) * _UNIT_NANOS[name] for name in _TIME_UNITS)
        sign = -1 if time < 0 else 1
        hours, remainder = divmod(abs(time), NANOS_PER_HOUR)
        minutes, remainder = divmod(remainder, NANOS_PER_MINUTE)
        seconds, remainder = divmod(remainder, NANOS_PER_SECOND)
        milliseconds, remainder = divmod(remainder, NANOS_PER_MILLISECOND)
        ticks, nanoseconds = divmod(remainder, NANOS_PER_TICK)
        return Period(
            years=self.years,
            months=self.months,
            days=self.days + 7 * self.weeks,
            hours=sign * hours,
            minutes=sign * minutes,
            seconds=sign * seconds,
            milliseconds=sign * milliseconds,
            ticks=sign * ticks,
            nanoseconds=sign * nanoseconds,
        )

    def _combine(self, other: "Period", factor: int) -> "Period":
        values = {f.name: getattr(self, f.name) + factor * getattr(other, f.name) for f in fields(self)}
        return Period(**values)

    def __add__(self, other: object) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return self._combine(other, 1)

    def __sub__(self, other: object) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return self._combine(other, -1)

    def __str__(self) -> str:
        text = "P" + "".join(f"{getattr(self, name)}{suffix}" for name, suffix in _DATE_DESIGNATORS if getattr(self, name))
        time = "".join(f"{getattr(self, name)}{suffix}" for name, suffix in _TIME_DESIGNATORS if getattr(self, name))
        if time:
            text += "T" + time
        return text if len(text) > 1 else "P0D"


Period.ZERO = Period()  # type: ignore[attr-defined]


__all__ = ["Period"]
