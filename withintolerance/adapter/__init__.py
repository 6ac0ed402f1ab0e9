"""
Predicate adapter: the assertion-facing surface of the tolerance check.

Exposed names
-------------
evaluate                    -- compare without raising on a miss (PredicateResult)
assert_within_tolerance_of  -- raise ToleranceAssertionFailure on a miss
assert_within_tol_of        -- short alias
Mode                        -- VALUE or LENGTH
expect / Expectation        -- fluent host with within_tolerance_of / within_tol_of
"""

from .expect import Expectation, expect, within_tolerance_of
from .predicate import (
    Mode,
    PredicateResult,
    assert_within_tol_of,
    assert_within_tolerance_of,
    describe_subject,
    evaluate,
)

__all__ = [
    "Mode",
    "PredicateResult",
    "describe_subject",
    "evaluate",
    "assert_within_tolerance_of",
    "assert_within_tol_of",
    "Expectation",
    "expect",
    "within_tolerance_of",
]
