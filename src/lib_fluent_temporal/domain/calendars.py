"""Calendar systems, eras, and ISO weekdays.

Purpose
-------
Give date-bearing values an explicit calendar identity. Two dates that denote
the same day under different calendars are *different values*; the calendar
is part of equality.

Contents
--------
* :class:`Era` – eras reported by the supported calendars.
* :class:`IsoDayOfWeek` – ISO-8601 weekday numbering (Monday = 1).
* :class:`CalendarSystem` – enum of supported calendars with conversion
  helpers between ``(year, month, day)`` triples and absolute day numbers.

System Role
-----------
Absolute day numbers follow :meth:`datetime.date.toordinal` (``0001-01-01``
ISO is day 1) and continue below 1 for proleptic years, so every calendar can
be projected onto the same axis. All calendar arithmetic runs through Julian
Day Numbers. ISO years run from -9998 to 9999; year 0 is 1 BCE.
"""

from __future__ import annotations

from enum import Enum

_JDN_OF_ORDINAL_ZERO = 1721425
_COPTIC_EPOCH_JDN = 1825030

MIN_ISO_YEAR = -9998
MAX_ISO_YEAR = 9999


class Era(Enum):
    """Era of a calendar year."""

    BEFORE_COMMON = "BCE"
    COMMON = "CE"
    ANNO_MARTYRUM = "AM"

    def __str__(self) -> str:
        return self.value


class IsoDayOfWeek(Enum):
    """Weekdays numbered as ISO-8601 does."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "IsoDayOfWeek":
        """Return the weekday of absolute day ``ordinal``."""
        return cls((ordinal - 1) % 7 + 1)


def _julian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def _jdn_to_julian(jdn: int) -> tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + m // 10
    return year, month, day


def _gregorian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def _jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def _coptic_to_jdn(year: int, month: int, day: int) -> int:
    return _COPTIC_EPOCH_JDN - 1 + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day


def _jdn_to_coptic(jdn: int) -> tuple[int, int, int]:
    year = (4 * (jdn - _COPTIC_EPOCH_JDN) + 1463) // 1461
    month = (jdn - _coptic_to_jdn(year, 1, 1)) // 30 + 1
    day = jdn + 1 - _coptic_to_jdn(year, month, 1)
    return year, month, day


def _is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


MIN_ORDINAL = _gregorian_to_jdn(MIN_ISO_YEAR, 1, 1) - _JDN_OF_ORDINAL_ZERO
MAX_ORDINAL = _gregorian_to_jdn(MAX_ISO_YEAR, 12, 31) - _JDN_OF_ORDINAL_ZERO


class CalendarSystem(Enum):
    """Calendar systems understood by the date-bearing value types.

    ``ISO`` and ``GREGORIAN`` share their arithmetic (proleptic Gregorian) but
    remain distinct identities, exactly like two calendars with different
    rules would.

    Examples
    --------
    >>> CalendarSystem.COPTIC.from_ordinal(CalendarSystem.ISO.to_ordinal(2020, 1, 1))
    (1736, 4, 22)
    >>> str(CalendarSystem.for_id("julian"))
    'Julian'
    """

    ISO = "ISO"
    GREGORIAN = "Gregorian"
    JULIAN = "Julian"
    COPTIC = "Coptic"

    def __str__(self) -> str:
        return self.value

    @property
    def id(self) -> str:
        return self.value

    @classmethod
    def for_id(cls, calendar_id: str) -> "CalendarSystem":
        """Resolve a calendar by its id, ignoring case and surrounding blanks."""
        normalized = calendar_id.strip().lower()
        for calendar in cls:
            if calendar.value.lower() == normalized:
                return calendar
        raise ValueError(f"Unknown calendar system: {calendar_id!r}")

    @property
    def months_in_year(self) -> int:
        return 13 if self is CalendarSystem.COPTIC else 12

    def is_leap_year(self, year: int) -> bool:
        if self is CalendarSystem.COPTIC:
            return year % 4 == 3
        if self is CalendarSystem.JULIAN:
            return year % 4 == 0
        return _is_gregorian_leap(year)

    def days_in_month(self, year: int, month: int) -> int:
        if self is CalendarSystem.COPTIC:
            if month < 13:
                return 30
            return 6 if self.is_leap_year(year) else 5
        if month == 2:
            return 29 if self.is_leap_year(year) else 28
        return 30 if month in (4, 6, 9, 11) else 31

    def era_of(self, year: int) -> Era:
        if self is CalendarSystem.COPTIC:
            return Era.ANNO_MARTYRUM
        return Era.COMMON if year >= 1 else Era.BEFORE_COMMON

    def year_of_era(self, year: int) -> int:
        """Return ``year`` counted within its era; proleptic year 0 is 1 BCE.

        >>> CalendarSystem.ISO.year_of_era(-43)
        44
        """
        return year if year >= 1 else 1 - year

    def validate(self, year: int, month: int, day: int) -> None:
        """Raise :class:`ValueError` when the triple is not a date in this calendar."""
        if self is CalendarSystem.COPTIC and year < 1:
            raise ValueError(f"year {year} is out of range for the {self.value} calendar")
        if not 1 <= month <= self.months_in_year:
            raise ValueError(f"month {month} is out of range for the {self.value} calendar")
        limit = self.days_in_month(year, month)
        if not 1 <= day <= limit:
            raise ValueError(f"day {day} is out of range for {self.value} {year}-{month:02d} (1..{limit})")

    def to_ordinal(self, year: int, month: int, day: int) -> int:
        """Return the absolute day number of a validated date in this calendar."""
        self.validate(year, month, day)
        if self is CalendarSystem.JULIAN:
            jdn = _julian_to_jdn(year, month, day)
        elif self is CalendarSystem.COPTIC:
            jdn = _coptic_to_jdn(year, month, day)
        else:
            jdn = _gregorian_to_jdn(year, month, day)
        ordinal = jdn - _JDN_OF_ORDINAL_ZERO
        if not MIN_ORDINAL <= ordinal <= MAX_ORDINAL:
            raise ValueError(f"{self.value} date {year}-{month:02d}-{day:02d} is outside the supported range")
        return ordinal

    def from_ordinal(self, ordinal: int) -> tuple[int, int, int]:
        """Return the ``(year, month, day)`` triple of absolute day ``ordinal``."""
        if not MIN_ORDINAL <= ordinal <= MAX_ORDINAL:
            raise ValueError(f"day number {ordinal} is outside the supported range")
        jdn = ordinal + _JDN_OF_ORDINAL_ZERO
        if self is CalendarSystem.JULIAN:
            return _jdn_to_julian(jdn)
        if self is CalendarSystem.COPTIC:
            if jdn < _COPTIC_EPOCH_JDN:
                raise ValueError(f"day number {ordinal} precedes the {self.value} epoch")
            return _jdn_to_coptic(jdn)
        return _jdn_to_gregorian(jdn)


__all__ = ["CalendarSystem", "Era", "IsoDayOfWeek", "MAX_ISO_YEAR", "MAX_ORDINAL", "MIN_ISO_YEAR", "MIN_ORDINAL"]
