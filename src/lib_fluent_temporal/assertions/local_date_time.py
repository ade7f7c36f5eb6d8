"""Assertions on :class:`~lib_fluent_temporal.domain.LocalDateTime` subjects."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from lib_fluent_temporal.adapters.families import LOCAL_DATE_TIME
from lib_fluent_temporal.domain import CalendarSystem, Continuation, LocalDateTime

from ._base import OrderedAssertions
from ._fields import ComponentAssertions, DateFieldAssertions, TimeFieldAssertions, as_calendar


def _as_local(expected: Any, calendar: CalendarSystem | str) -> Any:
    if isinstance(expected, datetime) and expected.tzinfo is None:
        return LocalDateTime.from_datetime(expected, as_calendar(calendar))
    return expected


class LocalDateTimeAssertions(DateFieldAssertions, TimeFieldAssertions, ComponentAssertions, OrderedAssertions):
    """Equality includes the calendar.

    ``be``/``not_be`` also accept a naive :class:`~datetime.datetime`, read in
    ``calendar`` (ISO by default).

    Examples
    --------
    >>> value = LocalDateTime.of(2020, 1, 1, 10)
    >>> LocalDateTimeAssertions(value, "value").be(datetime(2020, 1, 1, 10)).and_.subject.name
    'value'
    """

    family = LOCAL_DATE_TIME
    not_be_reports_actual = False

    def be(  # type: ignore[override]
        self, expected: Any, because: str = "", *because_args: Any, calendar: CalendarSystem | str = CalendarSystem.ISO
    ) -> Continuation:
        return super().be(_as_local(expected, calendar), because, *because_args)

    def not_be(  # type: ignore[override]
        self, unexpected: Any, because: str = "", *because_args: Any, calendar: CalendarSystem | str = CalendarSystem.ISO
    ) -> Continuation:
        return super().not_be(_as_local(unexpected, calendar), because, *because_args)


__all__ = ["LocalDateTimeAssertions"]
