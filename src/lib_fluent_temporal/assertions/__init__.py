"""Call-site assertion classes, one per value family."""

from __future__ import annotations

from .duration import DurationAssertions
from .instant import InstantAssertions
from .local_date import LocalDateAssertions
from .local_date_time import LocalDateTimeAssertions
from .local_time import LocalTimeAssertions
from .offset import OffsetAssertions
from .offset_date_time import OffsetDateTimeAssertions
from .offset_time import OffsetTimeAssertions
from .period import PeriodAssertions
from .zoned_date_time import ZonedDateTimeAssertions

__all__ = [
    "DurationAssertions",
    "InstantAssertions",
    "LocalDateAssertions",
    "LocalDateTimeAssertions",
    "LocalTimeAssertions",
    "OffsetAssertions",
    "OffsetDateTimeAssertions",
    "OffsetTimeAssertions",
    "PeriodAssertions",
    "ZonedDateTimeAssertions",
]
