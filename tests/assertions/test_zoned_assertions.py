from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from lib_fluent_temporal import AssertionFailure, DateTimeZone, Instant, LocalDateTime, Offset, ZonedDateTime, should

AMSTERDAM = DateTimeZone.for_id("Europe/Amsterdam")
SUMMER_NOON = ZonedDateTime.from_local(LocalDateTime.of(2020, 7, 1, 12), AMSTERDAM)


def test_have_zone_accepts_ids() -> None:
    assert should(SUMMER_NOON, "value").have_zone("Europe/Amsterdam").which == AMSTERDAM

    with pytest.raises(AssertionFailure) as excinfo:
        should(SUMMER_NOON, "value").have_zone("Europe/London")

    assert excinfo.value.message == "Expected value to have zone Europe/London, but found Europe/Amsterdam."


def test_zoned_fields_and_offset() -> None:
    should(SUMMER_NOON, "value").have_hour(12).and_.have_offset(Offset.from_hours(2)).and_.not_have_zone("UTC")


def test_zoned_equality_and_ordering() -> None:
    should(SUMMER_NOON, "value").be(datetime(2020, 7, 1, 12, tzinfo=ZoneInfo("Europe/Amsterdam")))
    should(SUMMER_NOON, "value").be_greater_than(
        ZonedDateTime.from_instant(Instant.from_utc(2020, 7, 1, 9), DateTimeZone.for_id("Europe/London"))
    )


def test_zoned_not_be_same_instant_elsewhere() -> None:
    should(SUMMER_NOON, "value").not_be(SUMMER_NOON.with_zone(DateTimeZone.UTC))


def test_zoned_value_inside_a_gap_equals_its_instant() -> None:
    value = ZonedDateTime.from_local(LocalDateTime.of(2021, 3, 28, 2, 30), AMSTERDAM)

    should(value, "value").be(ZonedDateTime.from_instant(value.to_instant(), AMSTERDAM)).and_.have_hour(3)
