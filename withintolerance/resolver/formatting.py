"""Display strings for resolved tolerance ranges."""

from __future__ import annotations

from numbers import Real

# Integral floats at or above this magnitude keep exponent notation.
_PLAIN_INTEGER_LIMIT: float = 1e21


def format_number(value: Real) -> str:
    """
    Render a number without float noise: ``5.0`` -> ``"5"``, ``-0.0`` -> ``"0"``.

    Non-integral values use the shortest round-trip form (``repr``).
    """
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def format_percent(fraction: float) -> str:
    return f"{format_number(fraction * 100)}%"


def format_tolerance(expected: Real, tol_pos: float, tol_neg: float) -> str:
    """
    Describe a tolerance band around ``expected``.

    Symmetric bands read ``"500 +/- 5%"``; asymmetric ones read
    ``"1000 +30% / -70%"``.
    """
    if tol_pos == tol_neg:
        return f"{format_number(expected)} +/- {format_percent(tol_pos)}"
    return f"{format_number(expected)} +{format_percent(tol_pos)} / -{format_percent(tol_neg)}"
