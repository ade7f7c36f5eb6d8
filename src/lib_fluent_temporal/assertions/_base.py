"""Building blocks shared by every assertion family.

Purpose
-------
Turn the family adapter plus the evaluation use case into the call-site API:
``be``/``not_be``, comparisons, proximity checks, and generated field
assertions.

Contents
--------
* :class:`TemporalAssertions` – base class holding the subject and family.
* :class:`OrderedAssertions` – the four comparison assertions.
* :class:`ProximityAssertions` – ``be_close_to`` / ``not_be_close_to``.
* :func:`field_assertion` / :func:`flag_assertion` – factories generating the
  ``have_x`` / ``not_have_x`` methods from a field name and a phrase.

System Role
-----------
Call-sites only choose a phrase, a predicate and the tail of the message; the
engine in :mod:`lib_fluent_temporal.application.use_cases.evaluate` does the
rest.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from datetime import timedelta
from typing import Any, ClassVar

from lib_fluent_temporal.adapters._formatting import expectation, format_reason, found, render
from lib_fluent_temporal.application.ports import ValueFamily
from lib_fluent_temporal.application.use_cases import Outcome, evaluate
from lib_fluent_temporal.domain import Continuation, Duration, Subject, WhichContinuation

Renderer = Callable[[Any], str]


class TemporalAssertions:
    """Assertions available on every value family."""

    family: ClassVar[ValueFamily]
    #: Whether a failed ``not_be`` ends with ``, but found {actual}``.
    not_be_reports_actual: ClassVar[bool] = True

    def __init__(self, value: Any, name: str) -> None:
        if value is not None and not self.family.accepts(value):
            raise TypeError(f"{type(self).__name__} cannot wrap a {type(value).__name__}")
        self.subject = Subject(value, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.subject.raw!r}, {self.subject.name!r})"

    def _check(
        self,
        phrase: str,
        predicate: Callable[[Any], bool],
        because: str,
        because_args: tuple[Any, ...],
        *,
        negated: bool = False,
        actual: Renderer | None = None,
        requires_presence: bool = True,
    ) -> Any:
        """Evaluate ``predicate`` and build the message from ``phrase``.

        ``actual`` renders the ``, but found …`` tail from the subject's raw
        value; without it a present subject's message simply ends with ``.``.
        """
        reason = format_reason(because, because_args)
        absent_style = self.family.absent_style

        def build(outcome: Outcome, subject: Subject) -> str:
            head = expectation(subject.name, phrase, reason, negated=negated)
            if outcome is Outcome.ABSENT:
                return head + absent_style.tail(subject.name)
            if actual is None:
                return head + "."
            return head + found(actual(subject.raw))

        return evaluate(self.subject, predicate, build, requires_presence=requires_presence)

    def _same(self, actual: Any, expected: Any) -> bool:
        if actual is None or expected is None:
            return actual is None and expected is None
        return self.family.equals(actual, expected)

    def be(self, expected: Any, because: str = "", *because_args: Any) -> Continuation:
        """Assert the subject equals ``expected`` under the family's equality.

        Both sides may be ``None``; absent equals absent.
        """
        expected = self.family.coerce(expected)
        self._check(
            f"be equal to {self.family.render(expected)}",
            lambda value: self._same(value, expected),
            because,
            because_args,
            actual=self.family.render,
            requires_presence=False,
        )
        return Continuation(self)

    def not_be(self, unexpected: Any, because: str = "", *because_args: Any) -> Continuation:
        """Assert the subject differs from ``unexpected``."""
        unexpected = self.family.coerce(unexpected)
        self._check(
            f"be equal to {self.family.render(unexpected)}",
            lambda value: not self._same(value, unexpected),
            because,
            because_args,
            negated=True,
            actual=self.family.render if self.not_be_reports_actual else None,
            requires_presence=False,
        )
        return Continuation(self)

    def _value_check(
        self, phrase: str, predicate: Callable[[Any], bool], because: str, because_args: tuple[Any, ...], *, negated: bool = False
    ) -> Continuation:
        """Check a property of the whole value, reporting the value itself (or ``<null>``)."""
        self._check(
            phrase,
            lambda value: value is not None and predicate(value),
            because,
            because_args,
            negated=negated,
            actual=self.family.render,
            requires_presence=False,
        )
        return Continuation(self)


class OrderedAssertions(TemporalAssertions):
    """Comparisons over the family's absolute ordering key."""

    def _compare(
        self, other: Any, phrase: str, compare: Callable[[Any, Any], bool], because: str, because_args: tuple[Any, ...]
    ) -> Continuation:
        other = self.family.coerce(other)
        if other is None:
            raise TypeError(f"cannot compare a {self.family.identifier} with None")
        key = self.family.ordering_key
        return self._value_check(
            f"{phrase} {self.family.render(other)}",
            lambda value: compare(key(value), key(other)),
            because,
            because_args,
        )

    def be_greater_than(self, other: Any, because: str = "", *because_args: Any) -> Continuation:
        return self._compare(other, "be greater than", operator.gt, because, because_args)

    def be_greater_than_or_equal_to(self, other: Any, because: str = "", *because_args: Any) -> Continuation:
        return self._compare(other, "be greater than or equal to", operator.ge, because, because_args)

    def be_less_than(self, other: Any, because: str = "", *because_args: Any) -> Continuation:
        return self._compare(other, "be less than", operator.lt, because, because_args)

    def be_less_than_or_equal_to(self, other: Any, because: str = "", *because_args: Any) -> Continuation:
        return self._compare(other, "be less than or equal to", operator.le, because, because_args)


def _as_duration(precision: Duration | timedelta) -> Duration:
    if isinstance(precision, timedelta):
        precision = Duration.from_timedelta(precision)
    if not isinstance(precision, Duration):
        raise TypeError(f"precision must be a Duration or timedelta, not {type(precision).__name__}")
    if precision.nanoseconds < 0:
        raise ValueError("The value of precision must be non-negative.")
    return precision


class ProximityAssertions(OrderedAssertions):
    """``be_close_to`` for families whose distance is a :class:`Duration`."""

    def _distance(self, value: Any, other: Any) -> Duration:
        raise NotImplementedError

    def _proximity(
        self, other: Any, precision: Duration | timedelta, because: str, because_args: tuple[Any, ...], *, negated: bool
    ) -> Continuation:
        precision = _as_duration(precision)
        other = self.family.coerce(other)
        if other is None:
            raise TypeError(f"cannot measure the distance between a {self.family.identifier} and None")
        reason = format_reason(because, because_args)
        phrase = f"be within {precision} from {self.family.render(other)}"

        def within(value: Any) -> bool:
            return (self._distance(value, other).nanoseconds <= precision.nanoseconds) != negated

        def build(outcome: Outcome, subject: Subject) -> str:
            head = expectation(subject.name, phrase, reason, negated=negated)
            if outcome is Outcome.ABSENT:
                return head + found(render(None))
            return f"{head}, but it was {self._distance(subject.value, other)}."

        evaluate(self.subject, within, build)
        return Continuation(self)

    def be_close_to(
        self, other: Any, precision: Duration | timedelta, because: str = "", *because_args: Any
    ) -> Continuation:
        """Assert the subject lies within ``precision`` of ``other`` (inclusive)."""
        return self._proximity(other, precision, because, because_args, negated=False)

    def not_be_close_to(
        self, other: Any, precision: Duration | timedelta, because: str = "", *because_args: Any
    ) -> Continuation:
        return self._proximity(other, precision, because, because_args, negated=True)


def field_assertion(
    attribute: str,
    phrase: str,
    *,
    negated: bool = False,
    formatter: Renderer = render,
    coerce: Callable[[Any], Any] | None = None,
    which: bool = False,
) -> Callable[..., Continuation]:
    """Generate an assertion comparing ``value.<attribute>`` with an expectation.

    ``phrase`` holds a ``{0}`` placeholder for the expected value, rendered by
    ``formatter`` (use :func:`~lib_fluent_temporal.adapters._formatting.as_formatted`
    for long counts). Negated assertions end their message after the phrase;
    positive ones report the actual field value.
    """

    def assertion(self: TemporalAssertions, expected: Any, because: str = "", *because_args: Any) -> Continuation:
        if coerce is not None:
            expected = coerce(expected)
        value = self._check(
            phrase.format(formatter(expected)),
            lambda subject_value: (getattr(subject_value, attribute) == expected) != negated,
            because,
            because_args,
            negated=negated,
            actual=None if negated else (lambda subject_value: formatter(getattr(subject_value, attribute))),
        )
        if which:
            return WhichContinuation(self, getattr(value, attribute))
        return Continuation(self)

    verb = "does not have" if negated else "has"
    assertion.__doc__ = f"Assert the subject {verb} ``{attribute}`` equal to ``expected``."
    return assertion


def flag_assertion(attribute: str, phrase: str, *, negated: bool = False) -> Callable[..., Continuation]:
    """Generate a shape assertion over the boolean ``value.<attribute>``."""

    def assertion(self: TemporalAssertions, because: str = "", *because_args: Any) -> Continuation:
        self._check(
            phrase,
            lambda value: bool(getattr(value, attribute)) != negated,
            because,
            because_args,
            negated=negated,
        )
        return Continuation(self)

    assertion.__doc__ = f"Assert ``{attribute}`` is {'false' if negated else 'true'}."
    return assertion


__all__ = [
    "OrderedAssertions",
    "ProximityAssertions",
    "TemporalAssertions",
    "field_assertion",
    "flag_assertion",
]
