"""Utilities that render values and message fragments for failure messages.

Why
---
Every assertion produces the same sentence shapes. Building the fragments in
one place keeps the wording identical across families and lets tests compare
literal strings.

Contents
--------
* :func:`render` – value rendering with ``<null>`` for absence.
* :func:`as_formatted` – thousands-grouped rendering for long counts.
* :func:`format_reason` – the `` because …`` clause.
* :func:`expectation` / :func:`found` – sentence head and tail.

System Role
-----------
Presentation helpers shared by the family adapters and the assertion classes.
"""

from __future__ import annotations

from typing import Any

NULL = "<null>"


def render(value: Any) -> str:
    """Render ``value`` for a message.

    Examples
    --------
    >>> render(None), render(5), render(2.5)
    ('<null>', '5', '2.5')
    """
    if value is None:
        return NULL
    if isinstance(value, float):
        return repr(value)
    return str(value)


def as_formatted(value: Any) -> str:
    """Render an integral count with thousands grouping.

    Examples
    --------
    >>> as_formatted(1234567)
    '1,234,567'
    >>> as_formatted(-42)
    '-42'
    >>> as_formatted(None)
    '<null>'
    """
    if value is None:
        return NULL
    if isinstance(value, bool) or not isinstance(value, int):
        return render(value)
    return f"{value:,}"


def format_reason(because: str, because_args: tuple[Any, ...] = ()) -> str:
    """Return the reason clause, including its leading blank.

    Examples
    --------
    >>> format_reason("")
    ''
    >>> format_reason("we want to test the failure {0}", ("message",))
    ' because we want to test the failure message'
    >>> format_reason("because it matters")
    ' because it matters'
    """
    text = because.format(*because_args) if because_args else because
    text = text.strip()
    if not text:
        return ""
    if not text.lower().startswith("because"):
        text = f"because {text}"
    return f" {text}"


def expectation(name: str, phrase: str, reason: str, *, negated: bool = False) -> str:
    """Return the head of a message without its closing tail.

    Examples
    --------
    >>> expectation("date", "have day 5", "")
    'Expected date to have day 5'
    >>> expectation("date", "have day 5", " because it matters", negated=True)
    'Did not expect date to have day 5 because it matters'
    """
    if negated:
        return f"Did not expect {name} to {phrase}{reason}"
    return f"Expected {name} to {phrase}{reason}"


def found(rendered: str) -> str:
    """Return the ``, but found …`` tail."""
    return f", but found {rendered}."


__all__ = ["NULL", "as_formatted", "expectation", "format_reason", "found", "render"]
