"""Assertions on :class:`~lib_fluent_temporal.domain.ZonedDateTime` subjects."""

from __future__ import annotations

from typing import Any

from lib_fluent_temporal.adapters.families import ZONED_DATE_TIME
from lib_fluent_temporal.domain import DateTimeZone

from ._base import OrderedAssertions, field_assertion
from ._fields import (
    ComponentAssertions,
    DateFieldAssertions,
    LocalDateTimeComponentAssertions,
    OffsetComponentAssertions,
    TimeFieldAssertions,
)


def _as_zone(value: Any) -> DateTimeZone:
    if isinstance(value, str):
        return DateTimeZone.for_id(value)
    return value


class ZonedDateTimeAssertions(
    DateFieldAssertions,
    TimeFieldAssertions,
    ComponentAssertions,
    LocalDateTimeComponentAssertions,
    OffsetComponentAssertions,
    OrderedAssertions,
):
    """Equality compares the local value and offset; ``have_zone`` checks the zone itself."""

    family = ZONED_DATE_TIME

    have_zone = field_assertion("zone", "have zone {0}", coerce=_as_zone, which=True)
    not_have_zone = field_assertion("zone", "have zone {0}", coerce=_as_zone, negated=True)


__all__ = ["ZonedDateTimeAssertions"]
