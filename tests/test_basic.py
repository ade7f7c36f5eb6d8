"""Behavioral tests for the package façade: dispatch, metadata and the demo showcase."""

from __future__ import annotations

import pytest

import lib_fluent_temporal
from lib_fluent_temporal import CalendarSystem, summary_info
from lib_fluent_temporal.lib_fluent_temporal import ASSERTIONS, run_demo


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_fluent_temporal" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_every_exported_value_type_has_assertions() -> None:
    exported = {getattr(lib_fluent_temporal, name) for name in lib_fluent_temporal.__all__}
    assert set(ASSERTIONS) <= exported
    assert len(ASSERTIONS) == 10


def test_assertion_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        ASSERTIONS[str] = object  # type: ignore[index]


def test_demo_in_iso_calendar() -> None:
    results = run_demo()

    assert [result.passed for result in results] == [True, True, True, True, False, True, False]
    assert results[4].message == "Expected period to have 6 seconds, but found 5."
    assert results[6].message == "Expected date to have day 1, but date was <null>."


def test_demo_in_coptic_calendar_exposes_calendar_sensitive_equality() -> None:
    results = run_demo(CalendarSystem.COPTIC)

    assert not results[1].passed
    assert results[1].message == "Expected date to be equal to 2020-01-01, but found 1736-04-22 (Coptic)."
    assert results[0].description == "1736-04-22 (Coptic) has year 1736"
