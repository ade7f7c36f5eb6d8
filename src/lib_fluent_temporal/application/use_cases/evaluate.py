"""Use case evaluating one expectation against a subject.

Purpose
-------
Provide the single evaluate-or-raise path every assertion goes through, so
absence handling and failure reporting behave identically across families.

Contents
--------
* :class:`Outcome` – why an evaluation failed.
* :data:`MessageBuilder` – callable rendering the failure message.
* :func:`evaluate` – run the predicate, raise :class:`AssertionFailure`.

System Role
-----------
Application layer. The engine is pure: it never logs, retries, or swallows a
failure. Assertion classes supply the predicate and the message builder.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from lib_fluent_temporal.domain import AssertionFailure, Subject


class Outcome(Enum):
    """Failure kinds handed to the message builder."""

    MISMATCH = "mismatch"
    ABSENT = "absent"


MessageBuilder = Callable[[Outcome, Subject], str]
Predicate = Callable[[Any], bool]


def evaluate(
    subject: Subject,
    predicate: Predicate,
    message_builder: MessageBuilder,
    *,
    requires_presence: bool = True,
) -> Any:
    """Return the validated value or raise :class:`AssertionFailure`.

    Parameters
    ----------
    subject:
        Value under test and its display name.
    predicate:
        Called with the subject's value. When ``requires_presence`` is
        ``False`` it also receives ``None`` for an absent subject.
    message_builder:
        Renders the message for a failed evaluation.
    requires_presence:
        ``True`` for every assertion except symmetric equality; an absent
        subject then fails with :attr:`Outcome.ABSENT` without consulting the
        predicate.

    Examples
    --------
    >>> evaluate(Subject(3, "n"), lambda v: v > 2, lambda o, s: "unused")
    3
    >>> evaluate(Subject(None, "n"), lambda v: v is None, lambda o, s: "unused", requires_presence=False) is None
    True
    >>> evaluate(Subject(None, "n"), lambda v: True, lambda o, s: f"{o.value} {s.name}")
    Traceback (most recent call last):
    ...
    lib_fluent_temporal.domain.failures.AssertionFailure: absent n
    """
    if not subject.is_present:
        if requires_presence:
            raise AssertionFailure(message_builder(Outcome.ABSENT, subject))
        if not predicate(None):
            raise AssertionFailure(message_builder(Outcome.MISMATCH, subject))
        return None

    value = subject.value
    if not predicate(value):
        raise AssertionFailure(message_builder(Outcome.MISMATCH, subject))
    return value


__all__ = ["MessageBuilder", "Outcome", "Predicate", "evaluate"]
