"""
Percentage tolerance checks for numbers and lengths.

Resolves an expected value and a symmetric or asymmetric percentage
tolerance into an inclusive range, and asserts that an observed value (or
a container's length) falls inside it:

    from withintolerance import expect

    expect(786).to.be.within_tolerance_of(1000, [0.3, -0.7])   # 300 .. 1300
    expect("foo").to.have.length.within_tol_of(2, 0.5)         # 1 .. 3
"""

import logging

from .adapter import (
    Expectation,
    Mode,
    PredicateResult,
    assert_within_tol_of,
    assert_within_tolerance_of,
    evaluate,
    expect,
)
from .errors import (
    InvalidExpectedError,
    InvalidTargetError,
    InvalidToleranceError,
    MissingLengthError,
    ToleranceAssertionFailure,
    ToleranceError,
)
from .presets import Preset, ToleranceRegistry, get_registry
from .resolver import Pair, ResolvedRange, Single, Tolerance, normalize_tolerance, resolve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # types
    "Single",
    "Pair",
    "Tolerance",
    "ResolvedRange",
    "Mode",
    "PredicateResult",
    "Expectation",
    "Preset",
    # resolver
    "normalize_tolerance",
    "resolve",
    # predicate
    "evaluate",
    "assert_within_tolerance_of",
    "assert_within_tol_of",
    "expect",
    # presets
    "ToleranceRegistry",
    "get_registry",
    # errors
    "ToleranceError",
    "InvalidExpectedError",
    "InvalidToleranceError",
    "InvalidTargetError",
    "MissingLengthError",
    "ToleranceAssertionFailure",
]
