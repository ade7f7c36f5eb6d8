"""Assertions on :class:`~lib_fluent_temporal.domain.OffsetDateTime` subjects.

The tick, nanosecond and year-of-era assertions of this family use the
"have 5 ticks within the second" wording instead of "have tick of second 5".
"""

from __future__ import annotations

from lib_fluent_temporal.adapters._formatting import as_formatted
from lib_fluent_temporal.adapters.families import OFFSET_DATE_TIME

from ._base import OrderedAssertions, field_assertion
from ._fields import (
    ComponentAssertions,
    DateFieldAssertions,
    LocalDateTimeComponentAssertions,
    OffsetComponentAssertions,
    TimeFieldAssertions,
)


class OffsetDateTimeAssertions(
    DateFieldAssertions,
    TimeFieldAssertions,
    ComponentAssertions,
    LocalDateTimeComponentAssertions,
    OffsetComponentAssertions,
    OrderedAssertions,
):
    """Equality needs the same local value and offset; comparisons use the instant."""

    family = OFFSET_DATE_TIME

    have_year_of_era = field_assertion("year_of_era", "have {0} as the year within the era")
    not_have_year_of_era = field_assertion("year_of_era", "have {0} as the year within the era", negated=True)
    have_tick_of_second = field_assertion("tick_of_second", "have {0} ticks within the second")
    not_have_tick_of_second = field_assertion("tick_of_second", "have {0} ticks within the second", negated=True)
    have_tick_of_day = field_assertion("tick_of_day", "have {0} ticks within the day", formatter=as_formatted)
    not_have_tick_of_day = field_assertion(
        "tick_of_day", "have {0} ticks within the day", formatter=as_formatted, negated=True
    )
    have_nanosecond_of_second = field_assertion("nanosecond_of_second", "have {0} nanoseconds within the second")
    not_have_nanosecond_of_second = field_assertion(
        "nanosecond_of_second", "have {0} nanoseconds within the second", negated=True
    )
    have_nanosecond_of_day = field_assertion(
        "nanosecond_of_day", "have {0} nanoseconds within the day", formatter=as_formatted
    )
    not_have_nanosecond_of_day = field_assertion(
        "nanosecond_of_day", "have {0} nanoseconds within the day", formatter=as_formatted, negated=True
    )


__all__ = ["OffsetDateTimeAssertions"]
