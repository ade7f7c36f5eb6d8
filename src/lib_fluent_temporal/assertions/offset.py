"""Assertions on :class:`~lib_fluent_temporal.domain.Offset` subjects."""

from __future__ import annotations

from typing import Any

from lib_fluent_temporal.adapters._formatting import as_formatted
from lib_fluent_temporal.adapters.families import OFFSET
from lib_fluent_temporal.domain import Continuation, Duration, Offset

from ._base import ProximityAssertions, field_assertion


class OffsetAssertions(ProximityAssertions):
    family = OFFSET
    not_be_reports_actual = False

    def _distance(self, value: Offset, other: Offset) -> Duration:
        return Duration.from_seconds(abs(value.seconds - other.seconds))

    def be_positive(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be positive", lambda value: value.seconds > 0, because, because_args)

    def be_negative(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be negative", lambda value: value.seconds < 0, because, because_args)

    def be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be zero", lambda value: value.seconds == 0, because, because_args)

    def not_be_zero(self, because: str = "", *because_args: Any) -> Continuation:
        return self._value_check("be zero", lambda value: value.seconds != 0, because, because_args, negated=True)

    have_seconds = field_assertion("seconds", "have {0} seconds")
    not_have_seconds = field_assertion("seconds", "have {0} seconds", negated=True)
    have_milliseconds = field_assertion("milliseconds", "have {0} milliseconds")
    not_have_milliseconds = field_assertion("milliseconds", "have {0} milliseconds", negated=True)
    have_ticks = field_assertion("ticks", "have {0} ticks", formatter=as_formatted)
    not_have_ticks = field_assertion("ticks", "have {0} ticks", formatter=as_formatted, negated=True)
    have_nanoseconds = field_assertion("nanoseconds", "have {0} nanoseconds", formatter=as_formatted)
    not_have_nanoseconds = field_assertion("nanoseconds", "have {0} nanoseconds", formatter=as_formatted, negated=True)


__all__ = ["OffsetAssertions"]
