"""Environment-driven settings for the command line tools.

Purpose
-------
Resolve the options of the ``demo`` command from the environment, optionally
seeded from the nearest ``.env`` file via :mod:`python-dotenv`.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle that enables ``.env`` loading.
* :func:`enable_dotenv` – load the nearest ``.env`` once per process.
* :class:`DemoSettings` / :func:`load_demo_settings` – resolved demo options.

System Role
-----------
Only the CLI reads configuration; the assertion API itself takes every input
as an argument. Existing environment variables always win over ``.env``
entries.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .domain import CalendarSystem

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LIB_FLUENT_TEMPORAL_USE_DOTENV"
CALENDAR_ENV_VAR = "LIB_FLUENT_TEMPORAL_DEMO_CALENDAR"
NO_COLOR_ENV_VAR = "LIB_FLUENT_TEMPORAL_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_loaded: Path | None = None
_dotenv_attempted = False


def env_flag(name: str, default: bool = False) -> bool:
    """Interpret environment variable ``name`` as a boolean switch."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load `.env`; an explicit flag beats the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value=" Yes ")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file at or above the working directory.

    Returns the resolved path of the file that was loaded, or ``None`` when
    none was found. Variables already present in the environment are kept.
    Subsequent calls return the first result without reading the file again.
    """
    global _dotenv_loaded, _dotenv_attempted

    if _dotenv_attempted:
        return _dotenv_loaded
    _dotenv_attempted = True

    found = find_dotenv(usecwd=True)
    if not found:
        logger.debug("no .env file found above %s", Path.cwd())
        return None
    load_dotenv(found, override=False)
    _dotenv_loaded = Path(found).resolve()
    logger.debug("loaded environment from %s", _dotenv_loaded)
    return _dotenv_loaded


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded, _dotenv_attempted
    _dotenv_loaded = None
    _dotenv_attempted = False


@dataclass(slots=True, frozen=True)
class DemoSettings:
    """Options of the ``demo`` command."""

    calendar: CalendarSystem = CalendarSystem.ISO
    colorize: bool = True


def load_demo_settings(*, calendar: str | None = None, colorize: bool | None = None) -> DemoSettings:
    """Merge explicit arguments over environment values.

    Raises
    ------
    ValueError
        If the calendar id is unknown.
    """
    calendar_id = calendar if calendar is not None else os.environ.get(CALENDAR_ENV_VAR)
    resolved_calendar = CalendarSystem.for_id(calendar_id) if calendar_id else CalendarSystem.ISO
    resolved_colorize = colorize if colorize is not None else not env_flag(NO_COLOR_ENV_VAR)
    return DemoSettings(calendar=resolved_calendar, colorize=resolved_colorize)


__all__ = [
    "CALENDAR_ENV_VAR",
    "DOTENV_ENV_VAR",
    "DemoSettings",
    "NO_COLOR_ENV_VAR",
    "enable_dotenv",
    "env_flag",
    "load_demo_settings",
    "should_use_dotenv",
]
