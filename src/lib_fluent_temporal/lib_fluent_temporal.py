"""Assertion façade that wires domain, application, and adapter layers together.

Purpose
-------
Expose the single entry point test code uses: :func:`should` wraps a value and
its display name in the assertion class of the value's family.

Contents
--------
* :data:`ASSERTIONS` – mapping from value type to assertion class.
* :func:`should` – dispatch by the value's type (or an explicit type for
  ``None``).
* :func:`run_demo` – evaluate a showcase of passing and failing assertions.
* :func:`summary_info` – metadata banner for the CLI.

System Role
-----------
Composition point of the package. Names are passed explicitly because Python
cannot recover the source expression of an argument, so messages read
``Expected period to have 6 seconds`` only when the caller says ``"period"``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .assertions import (
    DurationAssertions,
    InstantAssertions,
    LocalDateAssertions,
    LocalDateTimeAssertions,
    LocalTimeAssertions,
    OffsetAssertions,
    OffsetDateTimeAssertions,
    OffsetTimeAssertions,
    PeriodAssertions,
    ZonedDateTimeAssertions,
)
from .assertions._base import TemporalAssertions
from .domain import (
    AssertionFailure,
    CalendarSystem,
    Duration,
    Instant,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Offset,
    OffsetDateTime,
    OffsetTime,
    Period,
    ZonedDateTime,
)

logger = logging.getLogger(__name__)

ASSERTIONS: Mapping[type, type[TemporalAssertions]] = MappingProxyType(
    {
        Instant: InstantAssertions,
        LocalDate: LocalDateAssertions,
        LocalDateTime: LocalDateTimeAssertions,
        LocalTime: LocalTimeAssertions,
        OffsetTime: OffsetTimeAssertions,
        OffsetDateTime: OffsetDateTimeAssertions,
        ZonedDateTime: ZonedDateTimeAssertions,
        Period: PeriodAssertions,
        Duration: DurationAssertions,
        Offset: OffsetAssertions,
    }
)


def should(value: Any, name: str, value_type: type | None = None) -> Any:
    """Start an assertion chain on ``value`` reported as ``name``.

    Parameters
    ----------
    value:
        The subject; ``None`` is an absent subject.
    name:
        Display name used verbatim in failure messages.
    value_type:
        Family to use. Required when ``value`` is ``None``; otherwise it must
        agree with ``type(value)``.

    Raises
    ------
    TypeError
        If the value's type has no assertion family, or ``value`` is ``None``
        without ``value_type``.

    Examples
    --------
    >>> should(Period.from_seconds(5), "period").have_seconds(5).and_.have_date_component()
    Traceback (most recent call last):
    ...
    lib_fluent_temporal.domain.failures.AssertionFailure: Expected period to have a date component.
    >>> should(None, "date", LocalDate).be(None).and_.subject.is_present
    False
    """
    if value_type is None:
        if value is None:
            raise TypeError("value_type is required when the subject is None")
        value_type = type(value)
    try:
        assertions_class = ASSERTIONS[value_type]
    except KeyError as exc:
        raise TypeError(f"no assertions registered for {value_type.__name__}") from exc
    logger.debug("asserting on %s %r via %s", value_type.__name__, name, assertions_class.__name__)
    return assertions_class(value, name)


@dataclass(slots=True, frozen=True)
class DemoResult:
    """Outcome of one showcase assertion."""

    description: str
    passed: bool
    message: str = ""


def _demo_cases(calendar: CalendarSystem) -> list[tuple[str, Callable[[], object]]]:
    today = LocalDate(2020, 1, 1).with_calendar(calendar)
    iso_today = LocalDate(2020, 1, 1)
    moment = LocalDateTime.of(2020, 1, 1, 10, 15, 30).with_calendar(calendar)
    later = moment.plus_nanoseconds(1)
    period = Period.from_seconds(5)
    day = Period.from_hours(24)
    return [
        (f"{today} has year {today.year}", lambda: should(today, "date").have_year(today.year)),
        (f"{today} is {iso_today}", lambda: should(today, "date").be(iso_today)),
        (f"{today} is in calendar {calendar}", lambda: should(today, "date").be_in_calendar(calendar)),
        (f"{moment} is before {later}", lambda: should(moment, "moment").be_less_than(later)),
        (f"{period} has 6 seconds", lambda: should(period, "period").have_seconds(6)),
        (f"{day} equals one day", lambda: should(day, "period").be(Duration.from_days(1))),
        ("a missing date has day 1", lambda: should(None, "date", LocalDate).have_day(1)),
    ]


def run_demo(calendar: CalendarSystem = CalendarSystem.ISO) -> list[DemoResult]:
    """Run the showcase assertions in ``calendar`` and collect their outcomes.

    Examples
    --------
    >>> results = run_demo()
    >>> [result.passed for result in results]
    [True, True, True, True, False, True, False]
    """
    results: list[DemoResult] = []
    for description, case in _demo_cases(calendar):
        try:
            case()
        except AssertionFailure as failure:
            logger.debug("demo case %r failed: %s", description, failure.message)
            results.append(DemoResult(description, False, failure.message))
        else:
            results.append(DemoResult(description, True))
    return results


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["ASSERTIONS", "DemoResult", "run_demo", "should", "summary_info"]
