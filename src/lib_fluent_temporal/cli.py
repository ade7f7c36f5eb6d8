"""Command line interface for ``lib_fluent_temporal``.

Purpose
-------
Offer a small ``click`` front-end: the metadata banner and a showcase that
runs passing and failing assertions and prints their messages.

Contents
--------
* :func:`cli` – root command group with global ``--traceback`` and
  ``--use-dotenv`` switches.
* :func:`cli_info` / :func:`cli_demo` – subcommands.
* :func:`main` – console-script entry point delegating to
  :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Outer adapter only; the assertion API never depends on this module.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__, config
from .adapters.console import RichReportAdapter
from .lib_fluent_temporal import run_demo, summary_info

logger = logging.getLogger(__name__)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command)
@click.option(
    "--traceback/--no-traceback",
    default=None,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading settings (overrides {config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool | None, use_dotenv: bool | None) -> None:
    """Fluent assertions for calendar-aware temporal values."""
    if traceback is not None:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback
    if config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--calendar", "calendar", default=None, help="Calendar id used for the sample values (default: ISO).")
@click.option("--color/--no-color", "colorize", default=None, help="Colour the result table.")
def cli_demo(calendar: str | None, colorize: bool | None) -> None:
    """Run sample assertions and show each outcome and failure message."""
    try:
        settings = config.load_demo_settings(calendar=calendar, colorize=colorize)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--calendar") from exc
    results = run_demo(settings.calendar)
    adapter = RichReportAdapter(no_color=not settings.colorize)
    failures = adapter.emit(results, title=f"Assertions in calendar {settings.calendar}")
    logger.debug("demo finished with %d expected failures", failures)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and restore the global traceback preferences afterwards."""
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
