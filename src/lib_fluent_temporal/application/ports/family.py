"""Value-family port consumed by the assertion engine.

Purpose
-------
Describe, per temporal family, the few decisions the generic engine cannot
make on its own: how expectations of related types are converted, what
"equal" and "earlier" mean, and how values are rendered into messages.

Contents
--------
* :class:`AbsentStyle` – the two phrasings used when the subject is absent.
* :class:`ValueFamily` – runtime-checkable protocol implemented by adapters.

System Role
-----------
The assertion classes talk only to this protocol. Concrete families live in
:mod:`lib_fluent_temporal.adapters.families`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class AbsentStyle(Enum):
    """Tail appended to a failure message when the subject is absent."""

    NAMED = "named"
    FOUND = "found"

    def tail(self, name: str) -> str:
        """Return the message tail for subject ``name``.

        Examples
        --------
        >>> AbsentStyle.NAMED.tail("period")
        ', but period was <null>.'
        >>> AbsentStyle.FOUND.tail("duration")
        ', but found <null>.'
        """
        if self is AbsentStyle.NAMED:
            return f", but {name} was <null>."
        return ", but found <null>."


@runtime_checkable
class ValueFamily(Protocol):
    """Equality, ordering and rendering rules of one value family."""

    identifier: str
    absent_style: AbsentStyle

    def accepts(self, value: Any) -> bool:
        """Return ``True`` when ``value`` is a subject of this family."""

    def coerce(self, expected: Any) -> Any:
        """Convert a permitted cross-type expectation; raise :class:`TypeError` otherwise."""

    def equals(self, actual: Any, expected: Any) -> bool:
        """Family equality between two present values."""

    def ordering_key(self, value: Any) -> Any:
        """Return a key placing ``value`` on the family's absolute axis."""

    def render(self, value: Any) -> str:
        """Render ``value`` for failure messages."""


__all__ = ["AbsentStyle", "ValueFamily"]
