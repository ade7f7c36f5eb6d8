"""Subject wrapper: the value under test plus the name it is reported under.

Purpose
-------
Make absence a first-class state. A subject built from ``None`` is *absent*;
every assertion decides explicitly what absence means for it.

Contents
--------
* :class:`PreconditionError` – raised when an absent subject's value is read.
* :class:`Subject` – immutable ``(presence, value, name)`` triple.

System Role
-----------
Created once per :func:`lib_fluent_temporal.should` call and handed to the
assertion engine. Only the engine reads :attr:`Subject.value`, and only after
checking :attr:`Subject.is_present`, so :class:`PreconditionError` signals an
engine bug rather than a failed expectation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class PreconditionError(RuntimeError):
    """Internal misuse: the value of an absent subject was requested."""


@dataclass(slots=True, frozen=True)
class Subject:
    """Value under test and its display name.

    Examples
    --------
    >>> Subject(None, "date").is_present
    False
    >>> Subject(5, "count").value
    5
    """

    raw: Any
    name: str

    @property
    def is_present(self) -> bool:
        return self.raw is not None

    @property
    def value(self) -> Any:
        """Return the wrapped value.

        Raises
        ------
        PreconditionError
            If the subject is absent.
        """
        if self.raw is None:
            raise PreconditionError(f"subject {self.name!r} is absent; check is_present first")
        return self.raw


__all__ = ["PreconditionError", "Subject"]
