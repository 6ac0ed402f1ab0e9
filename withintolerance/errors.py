"""
Error taxonomy for tolerance checks.

Input problems (bad expected value, bad tolerance, bad subject) derive from
ToleranceError, itself a ValueError. A subject that was validly compared
but landed on the wrong side of the range raises ToleranceAssertionFailure,
an AssertionError, so test runners report it as an ordinary failed assert.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from withintolerance.resolver.types import ResolvedRange


class ToleranceError(ValueError):
    """Base class for invalid arguments passed to a tolerance check."""


class InvalidExpectedError(ToleranceError):
    """The expected value is not a finite real number."""


class InvalidToleranceError(ToleranceError):
    """The tolerance is not a number or a pair of compatible-sign numbers."""


class InvalidTargetError(ToleranceError):
    """The subject under test is not a number (value mode)."""


class MissingLengthError(ToleranceError):
    """Length mode was requested but the subject has no length."""


class ToleranceAssertionFailure(AssertionError):
    """
    The observed value fell outside the resolved range (or, negated, inside it).

    Attributes:
        subject: The object under test, as passed by the caller.
        observed: The number actually compared (the subject, or its length).
        resolved: The ResolvedRange the value was compared against.
        negated: True when the failing check was the negated form.
    """

    def __init__(
        self,
        message: str,
        *,
        subject: Any,
        observed: float,
        resolved: ResolvedRange,
        negated: bool = False,
    ) -> None:
        super().__init__(message)
        self.subject = subject
        self.observed = observed
        self.resolved = resolved
        self.negated = negated

    @property
    def display(self) -> str:
        """Human-readable description of the range, e.g. ``"500 +/- 5%"``."""
        return self.resolved.display
