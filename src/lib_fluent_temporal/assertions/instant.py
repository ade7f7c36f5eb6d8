"""Assertions on :class:`~lib_fluent_temporal.domain.Instant` subjects."""

from __future__ import annotations

from lib_fluent_temporal.adapters.families import INSTANT
from lib_fluent_temporal.domain import Duration, Instant

from ._base import ProximityAssertions


class InstantAssertions(ProximityAssertions):
    """Equality accepts an aware :class:`~datetime.datetime` in place of an instant.

    Examples
    --------
    >>> InstantAssertions(Instant.from_utc(2020, 1, 1), "instant").be_less_than(Instant.from_utc(2021, 1, 1)).and_
    InstantAssertions(Instant(nanoseconds_since_epoch=1577836800000000000), 'instant')
    """

    family = INSTANT

    def _distance(self, value: Instant, other: Instant) -> Duration:
        return Duration(abs(value.nanoseconds_since_epoch - other.nanoseconds_since_epoch))


__all__ = ["InstantAssertions"]
