"""Assertions on :class:`~lib_fluent_temporal.domain.Duration` subjects."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lib_fluent_temporal.adapters._formatting import as_formatted, render
from lib_fluent_temporal.adapters.families import DURATION
from lib_fluent_temporal.domain import Continuation, Duration

from ._base import ProximityAssertions, TemporalAssertions, field_assertion

DEFAULT_PRECISION = 0.01


def total_assertion(attribute: str, unit: str, *, negated: bool = False) -> Callable[..., Continuation]:
    """Generate ``have_total_<unit>`` comparing a float total within ``precision``."""

    def assertion(
        self: TemporalAssertions,
        expected: float,
        because: str = "",
        *because_args: Any,
        precision: float = DEFAULT_PRECISION,
    ) -> Continuation:
        self._check(
            f"have {render(expected)} total number of {unit} (+/- {render(precision)})",
            lambda value: (abs(getattr(value, attribute) - expected) <= precision) != negated,
            because,
            because_args,
            negated=negated,
            actual=None if negated else (lambda value: render(getattr(value, attribute))),
        )
        return Continuation(self)

    assertion.__doc__ = f"Assert ``{attribute}`` is {'not ' if negated else ''}within ``precision`` of ``expected``."
    return assertion


class DurationAssertions(ProximityAssertions):
    """Component assertions truncate towards zero; totals are approximate."""

    family = DURATION
    not_be_reports_actual = False

    def _distance(self, value: Duration, other: Duration) -> Duration:
        return abs(value - other)

    def be_positive(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be positive", lambda value: value.nanoseconds > 0, because, because_args)

    def be_negative(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be negative", lambda value: value.nanoseconds < 0, because, because_args)

    def be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be zero", lambda value: value.nanoseconds == 0, because, because_args)

    def not_be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check(
            "be zero", lambda value: value.nanoseconds != 0, because, because_args, negated=True
        )

    have_days = field_assertion("days", "have {0} days")
    not_have_days = field_assertion("days", "have {0} days", negated=True)
    have_hours = field_assertion("hours", "have {0} hours")
    not_have_hours = field_assertion("hours", "have {0} hours", negated=True)
    have_minutes = field_assertion("minutes", "have {0} minutes")
    not_have_minutes = field_assertion("minutes", "have {0} minutes", negated=True)
    have_seconds = field_assertion("seconds", "have {0} seconds")
    not_have_seconds = field_assertion("seconds", "have {0} seconds", negated=True)
    have_milliseconds = field_assertion("milliseconds", "have {0} milliseconds")
    not_have_milliseconds = field_assertion("milliseconds", "have {0} milliseconds", negated=True)
    have_subsecond_in_ticks = field_assertion("subsecond_ticks", "have {0} subseconds in ticks")
    not_have_subsecond_in_ticks = field_assertion("subsecond_ticks", "have {0} subseconds in ticks", negated=True)
    have_subsecond_in_nanoseconds = field_assertion("subsecond_nanoseconds", "have {0} subseconds in nanoseconds")
    not_have_subsecond_in_nanoseconds = field_assertion(
        "subsecond_nanoseconds", "have {0} subseconds in nanoseconds", negated=True
    )
    have_nanosecond_of_day = field_assertion(
        "nanosecond_of_day", "have {0} nanoseconds within the day", formatter=as_formatted
    )
    not_have_nanosecond_of_day = field_assertion(
        "nanosecond_of_day", "have {0} nanoseconds within the day", formatter=as_formatted, negated=True
    )
    have_ticks = field_assertion("bcl_compatible_ticks", "have {0} ticks", formatter=as_formatted)
    not_have_ticks = field_assertion("bcl_compatible_ticks", "have {0} ticks", formatter=as_formatted, negated=True)

    have_total_days = total_assertion("total_days", "days")
    not_have_total_days = total_assertion("total_days", "days", negated=True)
    have_total_hours = total_assertion("total_hours", "hours")
    not_have_total_hours = total_assertion("total_hours", "hours", negated=True)
    have_total_minutes = total_assertion("total_minutes", "minutes")
    not_have_total_minutes = total_assertion("total_minutes", "minutes", negated=True)
    have_total_seconds = total_assertion("total_seconds", "seconds")
    not_have_total_seconds = total_assertion("total_seconds", "seconds", negated=True)
    have_total_milliseconds = total_assertion("total_milliseconds", "milliseconds")
    not_have_total_milliseconds = total_assertion("total_milliseconds", "milliseconds", negated=True)
    have_total_ticks = total_assertion("total_ticks", "ticks")
    not_have_total_ticks = total_assertion("total_ticks", "ticks", negated=True)
    have_total_nanoseconds = total_assertion("total_nanoseconds", "nanoseconds")
    not_have_total_nanoseconds = total_assertion("total_nanoseconds", "nanoseconds", negated=True)


__all__ = ["DEFAULT_PRECISION", "DurationAssertions", "total_assertion"]
