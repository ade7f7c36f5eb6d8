"""Assertions on :class:`~lib_fluent_temporal.domain.LocalTime` subjects."""

from __future__ import annotations

from lib_fluent_temporal.adapters.families import LOCAL_TIME

from ._base import OrderedAssertions
from ._fields import TimeFieldAssertions


class LocalTimeAssertions(TimeFieldAssertions, OrderedAssertions):
    family = LOCAL_TIME


__all__ = ["LocalTimeAssertions"]
