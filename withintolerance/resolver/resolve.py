"""
Tolerance range resolution.

Turns an expected value and a percentage tolerance into an inclusive
numeric interval:

    start  = expected - expected × tol_neg
    finish = expected + expected × tol_pos

For a negative expected value the percentages move the bounds the other way
numerically, so the endpoints are swapped to keep start <= finish.
"""

from __future__ import annotations

import logging
from typing import Any

from withintolerance.errors import InvalidExpectedError

from .formatting import format_tolerance
from .normalize import normalize_tolerance
from .types import ResolvedRange, is_finite_number

logger = logging.getLogger(__name__)


def resolve(expected: Any, tol: Any) -> ResolvedRange:
    """
    Resolve the inclusive range allowed by ``tol`` around ``expected``.

    Args:
        expected: Centre of the band; a finite real number.
        tol: A number (symmetric), a sequence of one or two signed fractions
            (asymmetric), or a Single/Pair. 0.05 means 5%.

    Returns:
        ResolvedRange with start <= finish and a display string.

    Raises:
        InvalidExpectedError: If ``expected`` is not a finite real number.
        InvalidToleranceError: If ``tol`` has an invalid shape or sign.
    """
    if not is_finite_number(expected):
        raise InvalidExpectedError(
            f"expected must be a finite number, got {expected!r}"
        )

    pair = normalize_tolerance(tol)
    tol_pos, tol_neg = pair.tol_pos, pair.tol_neg

    start = expected - expected * tol_neg
    finish = expected + expected * tol_pos
    if expected < 0:
        start, finish = finish, start

    resolved = ResolvedRange(
        expected=expected,
        tol_pos=tol_pos,
        tol_neg=tol_neg,
        start=start,
        finish=finish,
        display=format_tolerance(expected, tol_pos, tol_neg),
    )
    logger.debug("Resolved %s to [%s, %s]", resolved.display, start, finish)
    return resolved
