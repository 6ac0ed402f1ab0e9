"""
Predicate adapter: compare a subject against a resolved tolerance range.

evaluate() returns a PredicateResult and never raises for an out-of-range
value; assert_within_tolerance_of() raises ToleranceAssertionFailure instead.
Both raise the ToleranceError family for invalid arguments, whether or not
the check is negated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from withintolerance.errors import (
    InvalidTargetError,
    MissingLengthError,
    ToleranceAssertionFailure,
)
from withintolerance.resolver import ResolvedRange, format_number, is_number, resolve

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """What is compared against the range: the subject itself or its length."""

    VALUE = "value"
    LENGTH = "length"


@dataclass(frozen=True)
class PredicateResult:
    """
    Outcome of one tolerance comparison.

    Attributes:
        passed: True when the observed value lies inside the range.
        observed: The compared number (the subject, or its length).
        resolved: The range the value was compared against.
        message: Failure text for the affirmative form.
        negated_message: Failure text for the negated form.
    """

    passed: bool
    observed: float
    resolved: ResolvedRange
    message: str
    negated_message: str


def describe_subject(subject: Any) -> str:
    if is_number(subject):
        return format_number(subject)
    return repr(subject)


def _observe(subject: Any, mode: Mode) -> float:
    if mode is Mode.LENGTH:
        if not hasattr(type(subject), "__len__"):
            raise MissingLengthError(
                f"expected {describe_subject(subject)} to have a length"
            )
        return len(subject)
    if not is_number(subject):
        raise InvalidTargetError(
            f"expected {describe_subject(subject)} to be a number"
        )
    return subject


def _messages(subject: Any, resolved: ResolvedRange, mode: Mode) -> tuple[str, str]:
    target = describe_subject(subject)
    if mode is Mode.LENGTH:
        return (
            f"expected {target} to have a length within tolerance of {resolved.display}",
            f"expected {target} to not have a length within tolerance of {resolved.display}",
        )
    return (
        f"expected {target} to be within tolerance of {resolved.display}",
        f"expected {target} to not be within tolerance of {resolved.display}",
    )


def evaluate(subject: Any, expected: Any, tol: Any, mode: Mode = Mode.VALUE) -> PredicateResult:
    """
    Check whether ``subject`` (or its length) lies within ``tol`` of ``expected``.

    Raises:
        InvalidExpectedError: ``expected`` is not a finite number.
        InvalidToleranceError: ``tol`` has an invalid shape or sign.
        InvalidTargetError: value mode and ``subject`` is not a number.
        MissingLengthError: length mode and ``subject`` has no length.
    """
    resolved = resolve(expected, tol)
    observed = _observe(subject, mode)
    passed = resolved.contains(observed)
    message, negated_message = _messages(subject, resolved, mode)
    logger.debug(
        "%s %s within [%s, %s]: %s",
        mode.value,
        observed,
        resolved.start,
        resolved.finish,
        "pass" if passed else "fail",
    )
    return PredicateResult(
        passed=passed,
        observed=observed,
        resolved=resolved,
        message=message,
        negated_message=negated_message,
    )


def assert_within_tolerance_of(
    subject: Any,
    expected: Any,
    tol: Any,
    message: Optional[str] = None,
    *,
    mode: Mode = Mode.VALUE,
    negate: bool = False,
) -> ResolvedRange:
    """
    Assert that ``subject`` lies within (or, with ``negate``, outside) the range.

    A caller-supplied ``message`` is prefixed to the failure text as
    ``"<message>: expected ..."``.

    Returns:
        The ResolvedRange that was checked.

    Raises:
        ToleranceAssertionFailure: The comparison went the wrong way.
        ToleranceError: Any argument is invalid (see evaluate()).
    """
    result = evaluate(subject, expected, tol, mode)
    if result.passed != negate:
        return result.resolved

    text = result.negated_message if negate else result.message
    if message:
        text = f"{message}: {text}"
    raise ToleranceAssertionFailure(
        text,
        subject=subject,
        observed=result.observed,
        resolved=result.resolved,
        negated=negate,
    )


assert_within_tol_of = assert_within_tolerance_of
