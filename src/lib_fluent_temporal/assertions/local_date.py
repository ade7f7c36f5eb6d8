"""Assertions on :class:`~lib_fluent_temporal.domain.LocalDate` subjects."""

from __future__ import annotations

from lib_fluent_temporal.adapters.families import LOCAL_DATE

from ._base import OrderedAssertions
from ._fields import DateFieldAssertions


class LocalDateAssertions(DateFieldAssertions, OrderedAssertions):
    """Equality includes the calendar; comparisons use the absolute day number."""

    family = LOCAL_DATE


__all__ = ["LocalDateAssertions"]
