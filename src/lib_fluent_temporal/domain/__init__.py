"""Domain layer: calendar-aware temporal values and the assertion engine's value objects."""

from __future__ import annotations

from .calendars import CalendarSystem, Era, IsoDayOfWeek
from .continuation import Continuation, WhichContinuation
from .duration import Duration
from .failures import AssertionFailure
from .instant import Instant
from .local import LocalDate, LocalDateTime, LocalTime
from .offset import Offset
from .offset_values import OffsetDateTime, OffsetTime
from .period import Period
from .subject import PreconditionError, Subject
from .zones import DateTimeZone, ZonedDateTime

__all__ = [
    "AssertionFailure",
    "CalendarSystem",
    "Continuation",
    "DateTimeZone",
    "Duration",
    "Era",
    "Instant",
    "IsoDayOfWeek",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Offset",
    "OffsetDateTime",
    "OffsetTime",
    "Period",
    "PreconditionError",
    "Subject",
    "WhichContinuation",
    "ZonedDateTime",
]
