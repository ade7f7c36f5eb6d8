from __future__ import annotations

from datetime import timedelta

import pytest

from lib_fluent_temporal import AssertionFailure, Duration, Period, should


def test_have_seconds_reports_raw_count() -> None:
    should(Period.from_seconds(5), "period").have_seconds(5)

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_seconds(5), "period").have_seconds(6)

    assert excinfo.value.message == "Expected period to have 6 seconds, but found 5."


def test_fields_are_not_normalised() -> None:
    should(Period.from_hours(24), "period").have_hours(24).and_.have_days(0)


def test_long_fields_render_grouped() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_hours(1), "period").have_hours(1234)

    assert excinfo.value.message == "Expected period to have 1,234 hours, but found 1."


def test_twenty_four_hours_equal_one_day_duration() -> None:
    should(Period.from_hours(24), "period").be(Duration.from_days(1))
    should(Period.from_minutes(60), "period").be(timedelta(hours=1))


def test_period_equality_compares_fixed_length() -> None:
    should(Period.from_hours(24), "period").be(Period.from_days(1))
    should(Period.from_months(1), "period").not_be(Period.from_days(30))


def test_period_with_months_never_equals_a_duration() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_months(1), "period").be(Duration.from_days(30))

    assert excinfo.value.message == "Expected period to be equal to 30:00:00:00, but found P1M."


def test_shape_assertions() -> None:
    should(Period.from_days(1), "period").have_date_component().and_.not_have_time_component()

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_seconds(5), "period").have_date_component()
    assert excinfo.value.message == "Expected period to have a date component."

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_seconds(5), "period").not_have_time_component("it is a date")
    assert excinfo.value.message == "Did not expect period to have a time component because it is a date."


def test_shape_assertion_on_absent_subject() -> None:
    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "period", Period).have_date_component()

    assert excinfo.value.message == "Expected period to have a date component, but period was <null>."


def test_zero_assertions() -> None:
    should(Period.ZERO, "period").be_zero()
    should(Period.from_days(1), "period").not_be_zero()

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_days(1), "period").be_zero()
    assert excinfo.value.message == "Expected period to be zero, but found P1D."

    with pytest.raises(AssertionFailure) as excinfo:
        should(None, "period", Period).be_zero()
    assert excinfo.value.message == "Expected period to be zero, but found <null>."

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.ZERO, "period").not_be_zero()
    assert excinfo.value.message == "Did not expect period to be zero, but found P0D."


def test_negated_field_assertion() -> None:
    should(Period.from_weeks(2), "period").not_have_weeks(1)

    with pytest.raises(AssertionFailure) as excinfo:
        should(Period.from_weeks(2), "period").not_have_weeks(2)

    assert excinfo.value.message == "Did not expect period to have 2 weeks."
