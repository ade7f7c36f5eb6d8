"""Fluent assertions for calendar-aware temporal values.

``should(value, name)`` is the whole public entry point; the value types in
:mod:`lib_fluent_temporal.domain` are re-exported for convenience.
"""

from __future__ import annotations

from .domain import (
    AssertionFailure,
    CalendarSystem,
    Continuation,
    DateTimeZone,
    Duration,
    Era,
    Instant,
    IsoDayOfWeek,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Offset,
    OffsetDateTime,
    OffsetTime,
    Period,
    PreconditionError,
    WhichContinuation,
    ZonedDateTime,
)
from .lib_fluent_temporal import should, summary_info

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
    "WhichContinuation",
    "ZonedDateTime",
    "should",
    "summary_info",
]
