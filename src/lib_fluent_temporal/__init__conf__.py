"""Package metadata shown by ``lib_fluent_temporal info``.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from collections.abc import Callable

name = "lib_fluent_temporal"
title = "Fluent assertions for calendar-aware dates, times, offsets, periods and durations"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_fluent_temporal"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_fluent_temporal"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (``print`` without newline by default).

    Examples
    --------
    >>> lines: list[str] = []
    >>> print_info(writer=lines.append)
    >>> lines[0].startswith("\\nInfo for lib_fluent_temporal:")
    True
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"\nInfo for {name}:\n\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    text = "".join(lines)
    if writer is None:
        print(text, end="")
    else:
        writer(text)


__all__ = ["author", "author_email", "homepage", "name", "print_info", "shell_command", "title", "version"]
