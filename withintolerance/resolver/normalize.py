"""
Normalization of raw tolerance arguments into the tagged Tolerance variant.

Accepted shapes:
    number          -> Single(t)            (symmetric, +/- |t|)
    []              -> Pair(0, 0)
    [a]             -> Pair(a, 0)
    [a, b, ...]     -> Pair(a, b)           (extra elements never inspected)
    Single / Pair   -> unchanged

Anything else raises InvalidToleranceError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from withintolerance.errors import InvalidToleranceError

from .types import Pair, Single, Tolerance, is_number

_NOT_SEQUENCES = (str, bytes, bytearray)


def to_tolerance(raw: Any) -> Tolerance:
    """
    Build a Single or Pair from a raw tolerance argument.

    Raises:
        InvalidToleranceError: If ``raw`` is not a number, a sequence, or an
            existing Tolerance, or if the values it yields are invalid.
    """
    if isinstance(raw, (Single, Pair)):
        return raw
    if is_number(raw):
        return Single(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, _NOT_SEQUENCES):
        match len(raw):
            case 0:
                return Pair(0, 0)
            case 1:
                return Pair(raw[0], 0)
            case _:
                return Pair(raw[0], raw[1])
    raise InvalidToleranceError(
        "tolerance must be a number or a sequence with a positive and a "
        f"negative number, got {raw!r}"
    )


def normalize_tolerance(raw: Any) -> Pair:
    """Normalize any accepted tolerance shape to a validated Pair."""
    return to_tolerance(raw).as_pair()
