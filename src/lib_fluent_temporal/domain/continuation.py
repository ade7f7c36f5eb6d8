"""Results of successful assertions, used for chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")


@dataclass(slots=True, frozen=True)
class Continuation(Generic[A]):
    """Chain another assertion on the same subject through :attr:`and_`."""

    and_: A


@dataclass(slots=True, frozen=True)
class WhichContinuation(Continuation[A]):
    """Continuation that also exposes the value the assertion validated.

    ``which`` is the component the assertion looked at, e.g. the
    :class:`~lib_fluent_temporal.domain.LocalDate` checked by ``have_date``.
    """

    which: Any


__all__ = ["Continuation", "WhichContinuation"]
