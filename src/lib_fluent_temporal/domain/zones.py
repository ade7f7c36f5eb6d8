"""Time zones and zoned date-times.

Purpose
-------
Wrap IANA zone rules (:mod:`zoneinfo`, backed by the ``tzdata`` package where
the platform lacks a zone database) behind a small immutable value so zoned
values stay hashable and comparable.

Contents
--------
* :class:`DateTimeZone` – a zone id plus the rules to compute offsets.
* :class:`ZonedDateTime` – local date-time, offset, and zone.

System Role
-----------
``ZonedDateTime`` equality compares the local value and the offset; the zone
identity is carried for rendering and for the ``have_zone`` assertion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .calendars import CalendarSystem
from .instant import Instant
from .local import DateFields, LocalDate, LocalDateTime, LocalTime, TimeFields
from .offset import Offset
from .offset_values import OffsetDateTime


# Instants outside what datetime can localise use the rules of the nearest
# representable day.
_EARLIEST_ZONE_SECONDS = (date.min.toordinal() + 1 - date(1970, 1, 1).toordinal()) * 86_400
_LATEST_ZONE_SECONDS = (date.max.toordinal() - 1 - date(1970, 1, 1).toordinal()) * 86_400


@lru_cache(maxsize=None)
def _load_zone(zone_id: str) -> ZoneInfo:
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown time zone id: {zone_id!r}") from exc


@dataclass(slots=True, frozen=True)
class DateTimeZone:
    """A named set of offset rules.

    Fixed-offset zones use ids such as ``UTC+01:00``; everything else is an
    IANA id resolved through :mod:`zoneinfo`.

    Examples
    --------
    >>> zone = DateTimeZone.for_id("Europe/Amsterdam")
    >>> str(zone.offset_at(Instant.from_utc(2020, 7, 1)))
    '+02:00'
    >>> DateTimeZone.for_offset(Offset.from_hours(1)).id
    'UTC+01:00'
    """

    id: str
    fixed_offset: Offset | None = field(default=None, repr=False)

    @classmethod
    def for_id(cls, zone_id: str) -> "DateTimeZone":
        if zone_id == "UTC":
            return cls("UTC", Offset(0))
        if zone_id.startswith("UTC") and len(zone_id) > 3:
            return cls(zone_id, _parse_fixed_offset(zone_id[3:]))
        _load_zone(zone_id)
        return cls(zone_id)

    @classmethod
    def for_offset(cls, offset: Offset) -> "DateTimeZone":
        if offset.seconds == 0:
            return cls("UTC", offset)
        return cls(f"UTC{offset}", offset)

    def _tzinfo(self) -> tzinfo:
        if self.fixed_offset is not None:
            return timezone(self.fixed_offset.to_timedelta())
        return _load_zone(self.id)

    def offset_at(self, instant: Instant) -> Offset:
        """Return the offset in force at ``instant``."""
        if self.fixed_offset is not None:
            return self.fixed_offset
        seconds = min(max(instant.unix_time_seconds, _EARLIEST_ZONE_SECONDS), _LATEST_ZONE_SECONDS)
        moment = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=seconds)
        utcoffset = moment.astimezone(self._tzinfo()).utcoffset()
        return Offset.from_timedelta(utcoffset if utcoffset is not None else timedelta(0))

    def resolve_offset(self, local: LocalDateTime) -> Offset:
        """Return the offset for a wall-clock value.

        Ambiguous values (clocks going back) take the earlier offset. Skipped
        values (clocks going forward) take the offset before the gap;
        :meth:`ZonedDateTime.from_local` moves those past the gap.
        """
        if self.fixed_offset is not None:
            return self.fixed_offset
        if not date.min.toordinal() < local.date.ordinal < date.max.toordinal():
            return self.offset_at(Instant.from_local_utc(local))
        naive = local.to_naive_datetime()
        utcoffset = naive.replace(tzinfo=self._tzinfo(), fold=0).utcoffset()
        return Offset.from_timedelta(utcoffset if utcoffset is not None else timedelta(0))

    def __str__(self) -> str:
        return self.id


def _parse_fixed_offset(text: str) -> Offset:
    sign = -1 if text.startswith("-") else 1
    parts = text.lstrip("+-").split(":")
    try:
        numbers = [int(part) for part in parts]
    except ValueError as exc:
        raise ValueError(f"Unknown time zone id: UTC{text!r}") from exc
    hours, minutes, seconds = (numbers + [0, 0])[:3]
    return Offset(sign * (hours * 3600 + minutes * 60 + seconds))


DateTimeZone.UTC = DateTimeZone("UTC", Offset(0))  # type: ignore[attr-defined]


@dataclass(slots=True, frozen=True)
class ZonedDateTime(DateFields, TimeFields):
    """A local date-time in a zone, with the offset that applied.

    Examples
    --------
    >>> zone = DateTimeZone.for_id("Europe/London")
    >>> value = ZonedDateTime.from_instant(Instant.from_utc(2020, 7, 1, 12), zone)
    >>> str(value)
    '2020-07-01T13:00:00 Europe/London (+01:00)'
    """

    local_date_time: LocalDateTime
    offset: Offset
    zone: DateTimeZone = field(default=DateTimeZone("UTC", Offset(0)), compare=False)

    def __post_init__(self) -> None:
        if self.zone.fixed_offset is not None:
            if self.zone.fixed_offset != self.offset:
                raise ValueError(f"offset {self.offset} does not match fixed zone {self.zone}")
        elif self.zone.offset_at(self.to_instant()) != self.offset:
            raise ValueError(f"{self.local_date_time}{self.offset} does not occur in zone {self.zone}")

    @classmethod
    def from_instant(
        cls, instant: Instant, zone: DateTimeZone, calendar: CalendarSystem = CalendarSystem.ISO
    ) -> "ZonedDateTime":
        offset = zone.offset_at(instant)
        local = OffsetDateTime.from_instant(instant, offset, calendar).local_date_time
        return cls(local, offset, zone)

    @classmethod
    def from_local(cls, local: LocalDateTime, zone: DateTimeZone) -> "ZonedDateTime":
        """Place a wall-clock value in ``zone``.

        Ambiguous values take the earlier offset. Values inside a gap move
        forward by the length of the gap.

        Examples
        --------
        >>> zone = DateTimeZone.for_id("Europe/Amsterdam")
        >>> str(ZonedDateTime.from_local(LocalDateTime.of(2021, 3, 28, 2, 30), zone))
        '2021-03-28T03:30:00 Europe/Amsterdam (+02:00)'
        """
        offset = zone.resolve_offset(local)
        instant = OffsetDateTime(local, offset).to_instant()
        if zone.offset_at(instant) != offset:
            return cls.from_instant(instant, zone, local.calendar)
        return cls(local, offset, zone)

    @classmethod
    def from_datetime(cls, value: datetime, calendar: CalendarSystem = CalendarSystem.ISO) -> "ZonedDateTime":
        """Convert an aware datetime whose ``tzinfo`` is a :class:`~zoneinfo.ZoneInfo` or fixed offset."""
        utcoffset = value.utcoffset()
        if utcoffset is None:
            raise ValueError("naive datetime has no zone; attach a tzinfo first")
        key = getattr(value.tzinfo, "key", None)
        if key:
            return cls.from_instant(Instant.from_datetime(value), DateTimeZone.for_id(key), calendar)
        offset = Offset.from_timedelta(utcoffset)
        return cls(LocalDateTime.from_datetime(value, calendar), offset, DateTimeZone.for_offset(offset))

    @property
    def date(self) -> LocalDate:
        return self.local_date_time.date

    @property
    def time_of_day(self) -> LocalTime:
        return self.local_date_time.time_of_day

    def to_offset_date_time(self) -> OffsetDateTime:
        return OffsetDateTime(self.local_date_time, self.offset)

    def to_instant(self) -> Instant:
        return self.to_offset_date_time().to_instant()

    def with_zone(self, zone: DateTimeZone) -> "ZonedDateTime":
        """Return the same instant seen in ``zone``."""
        return ZonedDateTime.from_instant(self.to_instant(), zone, self.calendar)

    def __str__(self) -> str:
        return f"{self.local_date_time} {self.zone.id} ({self.offset})"


__all__ = ["DateTimeZone", "ZonedDateTime"]
