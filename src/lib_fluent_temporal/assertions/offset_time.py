"""Assertions on :class:`~lib_fluent_temporal.domain.OffsetTime` subjects."""

from __future__ import annotations

from lib_fluent_temporal.adapters.families import OFFSET_TIME

from ._base import TemporalAssertions, field_assertion
from ._fields import OffsetComponentAssertions, TimeFieldAssertions, as_local_time


class OffsetTimeAssertions(TimeFieldAssertions, OffsetComponentAssertions, TemporalAssertions):
    """Equality requires the same time of day *and* the same offset."""

    family = OFFSET_TIME

    have_time_of_day = field_assertion("time_of_day", "have time of day {0}", coerce=as_local_time, which=True)
    not_have_time_of_day = field_assertion("time_of_day", "have time of day {0}", coerce=as_local_time, negated=True)


__all__ = ["OffsetTimeAssertions"]
