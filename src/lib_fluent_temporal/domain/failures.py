"""Failure raised when an expectation does not hold."""

from __future__ import annotations


class AssertionFailure(AssertionError):
    """A failed expectation carrying the fully rendered message.

    Subclassing :class:`AssertionError` lets pytest and ``unittest`` report it
    as an ordinary test failure.

    Examples
    --------
    >>> failure = AssertionFailure("Expected period to have 6 seconds, but found 5.")
    >>> failure.message
    'Expected period to have 6 seconds, but found 5.'
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ["AssertionFailure"]
