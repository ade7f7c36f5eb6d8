from __future__ import annotations

from datetime import timedelta

import pytest

from lib_fluent_temporal.domain import Duration, Offset, Period
from lib_fluent_temporal.domain.duration import NANOS_PER_DAY


def test_duration_components_truncate_towards_zero() -> None:
    value = Duration.from_minutes(-90)

    assert value.hours == -1
    assert value.minutes == -30
    assert value.total_hours == -1.5


def test_duration_string_uses_day_clock_layout() -> None:
    assert str(Duration.from_hours(26) + Duration.from_milliseconds(5)) == "1:02:00:00.005"
    assert str(-Duration.from_seconds(1)) == "-0:00:00:01"
    assert str(Duration.ZERO) == "0:00:00:00"


def test_duration_sub_second_views() -> None:
    value = Duration.from_seconds(3) + Duration.from_nanoseconds(1_234_567)

    assert value.subsecond_nanoseconds == 1_234_567
    assert value.subsecond_ticks == 12_345
    assert value.milliseconds == 1
    assert Duration(-250).bcl_compatible_ticks == -2


def test_duration_from_timedelta_keeps_microseconds() -> None:
    value = Duration.from_timedelta(timedelta(days=1, microseconds=3))

    assert value.nanoseconds == NANOS_PER_DAY + 3_000
    assert value.to_timedelta() == timedelta(days=1, microseconds=3)


def test_duration_to_timedelta_truncates_exactly() -> None:
    large = Duration(NANOS_PER_DAY * 1_000_000 + 1_999)

    assert large.to_timedelta() == timedelta(days=1_000_000, microseconds=1)
    assert Duration(-1_999).to_timedelta() == timedelta(microseconds=-1)


def test_period_keeps_raw_fields() -> None:
    assert Period.from_hours(24) != Period.from_days(1)
    assert Period.from_hours(24).to_duration() == Period.from_days(1).to_duration()
    assert str(Period(years=1, days=3, hours=4, milliseconds=5)) == "P1Y3DT4H5s"


def test_zero_period_renders_as_zero_days() -> None:
    assert str(Period.ZERO) == "P0D"
    assert str(Period.from_days(0)) == "P0D"


def test_period_component_flags() -> None:
    assert Period.from_weeks(1).has_date_component
    assert not Period.from_weeks(1).has_time_component
    assert Period.from_ticks(1).has_time_component
    assert not Period.ZERO.has_date_component


def test_period_with_months_has_no_fixed_length() -> None:
    with pytest.raises(ValueError, match="years or months"):
        Period.from_months(1).to_duration()


def test_period_normalize_folds_weeks_and_carries_time_units() -> None:
    normalized = Period(weeks=1, hours=25, minutes=61).normalize()

    assert normalized == Period(days=7, hours=26, minutes=1)


def test_period_arithmetic_is_field_wise() -> None:
    assert Period.from_days(2) + Period.from_hours(3) == Period(days=2, hours=3)
    assert Period.from_days(2) - Period.from_days(2) == Period.ZERO


def test_offset_string_forms() -> None:
    assert str(Offset.from_hours_and_minutes(5, 30)) == "+05:30"
    assert str(Offset.from_seconds(-3661)) == "-01:01:01"
    assert str(Offset.ZERO) == "+00:00"


def test_offset_unit_views() -> None:
    value = Offset.from_hours(1)

    assert value.milliseconds == 3_600_000
    assert value.ticks == 36_000_000_000
    assert value.nanoseconds == 3_600_000_000_000


def test_offset_from_timedelta() -> None:
    assert Offset.from_timedelta(timedelta(hours=-2)).seconds == -7200
    with pytest.raises(ValueError, match="whole number of seconds"):
        Offset.from_timedelta(timedelta(milliseconds=5))


def test_offset_is_limited_to_eighteen_hours() -> None:
    with pytest.raises(ValueError, match="outside"):
        Offset.from_hours(19)
