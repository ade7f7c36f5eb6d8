"""Assertions on :class:`~lib_fluent_temporal.domain.Period` subjects.

Field assertions compare the raw, unnormalised counts; ``be`` compares years,
months and the fixed length of everything else, or the absolute length when
the expectation is a :class:`~lib_fluent_temporal.domain.Duration`.
"""

from __future__ import annotations

from typing import Any

from lib_fluent_temporal.adapters._formatting import as_formatted
from lib_fluent_temporal.adapters.families import PERIOD
from lib_fluent_temporal.domain import Continuation, Period

from ._base import TemporalAssertions, field_assertion, flag_assertion


class PeriodAssertions(TemporalAssertions):
    """Period assertions; long-valued counts render with thousands grouping.

    Examples
    --------
    >>> PeriodAssertions(Period.from_seconds(5), "period").have_seconds(6)
    Traceback (most recent call last):
    ...
    lib_fluent_temporal.domain.failures.AssertionFailure: Expected period to have 6 seconds, but found 5.
    """

    family = PERIOD

    def be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be zero", lambda value: value == Period.ZERO, because, because_args)

    def not_be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be zero", lambda value: value != Period.ZERO, because, because_args, negated=True)

    have_years = field_assertion("years", "have {0} years")
    not_have_years = field_assertion("years", "have {0} years", negated=True)
    have_months = field_assertion("months", "have {0} months")
    not_have_months = field_assertion("months", "have {0} months", negated=True)
    have_weeks = field_assertion("weeks", "have {0} weeks")
    not_have_weeks = field_assertion("weeks", "have {0} weeks", negated=True)
    have_days = field_assertion("days", "have {0} days")
    not_have_days = field_assertion("days", "have {0} days", negated=True)
    have_hours = field_assertion("hours", "have {0} hours", formatter=as_formatted)
    not_have_hours = field_assertion("hours", "have {0} hours", formatter=as_formatted, negated=True)
    have_minutes = field_assertion("minutes", "have {0} minutes", formatter=as_formatted)
    not_have_minutes = field_assertion("minutes", "have {0} minutes", formatter=as_formatted, negated=True)
    have_seconds = field_assertion("seconds", "have {0} seconds", formatter=as_formatted)
    not_have_seconds = field_assertion("seconds", "have {0} seconds", formatter=as_formatted, negated=True)
    have_milliseconds = field_assertion("milliseconds", "have {0} milliseconds", formatter=as_formatted)
    not_have_milliseconds = field_assertion(
        "milliseconds", "have {0} milliseconds", formatter=as_formatted, negated=True
    )
    have_ticks = field_assertion("ticks", "have {0} ticks", formatter=as_formatted)
    not_have_ticks = field_assertion("ticks", "have {0} ticks", formatter=as_formatted, negated=True)
    have_nanoseconds = field_assertion("nanoseconds", "have {0} nanoseconds", formatter=as_formatted)
    not_have_nanoseconds = field_assertion("nanoseconds", "have {0} nanoseconds", formatter=as_formatted, negated=True)

    have_date_component = flag_assertion("has_date_component", "have a date component")
    not_have_date_component = flag_assertion("has_date_component", "have a date component", negated=True)
    have_time_component = flag_assertion("has_time_component", "have a time component")
    not_have_time_component = flag_assertion("has_time_component", "have a time component", negated=True)


__all__ = ["PeriodAssertions"]
