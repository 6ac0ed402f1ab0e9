"""
Core type definitions for the tolerance resolver.

A tolerance is a tagged variant: Single(value) for a symmetric band or
Pair(first, second) for an asymmetric one. Both are frozen dataclasses with
fail-fast validation in __post_init__, so an instance that exists is valid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

from withintolerance.errors import InvalidToleranceError


def is_number(value: Any) -> bool:
    """True for finite-or-not real numbers, excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    """True for real numbers (booleans excluded) that are neither nan nor inf.

    Integers too large to convert to a float count as non-finite.
    """
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


@dataclass(frozen=True)
class Single:
    """
    Symmetric tolerance: the same fraction above and below expected.

    The sign of ``value`` is irrelevant; Single(0.05) and Single(-0.05)
    describe the same +/- 5% band.
    """

    value: float

    def __post_init__(self) -> None:
        if not is_finite_number(self.value):
            raise InvalidToleranceError(
                f"tolerance must be a finite number, got {self.value!r}"
            )

    def as_pair(self) -> Pair:
        return Pair(self.value, -self.value)


@dataclass(frozen=True)
class Pair:
    """
    Asymmetric tolerance: one upward and one downward signed fraction.

    Order does not matter: Pair(0.3, -0.7) and Pair(-0.7, 0.3) both mean
    +30% / -70%. The two values may not share a sign unless one is zero.
    """

    first: float
    second: float

    def __post_init__(self) -> None:
        for name in ("first", "second"):
            value = getattr(self, name)
            if not is_finite_number(value):
                raise InvalidToleranceError(
                    f"tolerance {name} value must be a finite number, got {value!r}"
                )
        a, b = self.first, self.second
        if a != 0 and b != 0 and (a > 0) == (b > 0):
            raise InvalidToleranceError(
                "tolerance must pair a positive and a negative number, "
                f"got ({a!r}, {b!r})"
            )

    def as_pair(self) -> Pair:
        return self

    @property
    def tol_pos(self) -> float:
        """Magnitude of the upward bound."""
        return abs(max(self.first, self.second))

    @property
    def tol_neg(self) -> float:
        """Magnitude of the downward bound."""
        return abs(min(self.first, self.second))


Tolerance = Union[Single, Pair]


@dataclass(frozen=True)
class ResolvedRange:
    """
    Inclusive interval derived from an expected value and a tolerance.

    ``start <= finish`` always holds. ``display`` is for diagnostics only and
    never takes part in comparisons.
    """

    expected: float
    tol_pos: float
    tol_neg: float
    start: float
    finish: float
    display: str

    def __post_init__(self) -> None:
        if self.start > self.finish:
            raise ValueError(
                f"start must not exceed finish, got [{self.start}, {self.finish}]"
            )

    def contains(self, value: float) -> bool:
        return self.start <= value <= self.finish

    @property
    def is_point(self) -> bool:
        return self.start == self.finish

    @property
    def is_symmetric(self) -> bool:
        return self.tol_pos == self.tol_neg
