from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_fluent_temporal import cli as cli_module
from lib_fluent_temporal import config as temporal_config
from lib_fluent_temporal.domain import CalendarSystem


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    temporal_config._reset_dotenv_state_for_testing()
    yield
    temporal_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found above the working directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text(f"{temporal_config.CALENDAR_ENV_VAR}=julian\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv(temporal_config.CALENDAR_ENV_VAR, raising=False)

    loaded = temporal_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ[temporal_config.CALENDAR_ENV_VAR] == "julian"
    assert temporal_config.load_demo_settings().calendar is CalendarSystem.JULIAN

    os.environ.pop(temporal_config.CALENDAR_ENV_VAR, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text(f"{temporal_config.CALENDAR_ENV_VAR}=julian\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv(temporal_config.CALENDAR_ENV_VAR, "coptic")

    result = temporal_config.enable_dotenv()

    assert result is not None
    assert os.environ[temporal_config.CALENDAR_ENV_VAR] == "coptic"


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(temporal_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(temporal_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []

    env = {temporal_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "yes", False),
        (None, "On", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert temporal_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_demo_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(temporal_config.CALENDAR_ENV_VAR, "Coptic")
    monkeypatch.setenv(temporal_config.NO_COLOR_ENV_VAR, "true")

    settings = temporal_config.load_demo_settings()

    assert settings == temporal_config.DemoSettings(calendar=CalendarSystem.COPTIC, colorize=False)


def test_demo_settings_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(temporal_config.CALENDAR_ENV_VAR, "Coptic")
    monkeypatch.setenv(temporal_config.NO_COLOR_ENV_VAR, "true")

    settings = temporal_config.load_demo_settings(calendar="julian", colorize=True)

    assert settings == temporal_config.DemoSettings(calendar=CalendarSystem.JULIAN, colorize=True)


def test_demo_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(temporal_config.CALENDAR_ENV_VAR, raising=False)
    monkeypatch.delenv(temporal_config.NO_COLOR_ENV_VAR, raising=False)

    assert temporal_config.load_demo_settings() == temporal_config.DemoSettings()


def test_demo_settings_reject_unknown_calendar() -> None:
    with pytest.raises(ValueError, match="Unknown calendar system"):
        temporal_config.load_demo_settings(calendar="lunar")
