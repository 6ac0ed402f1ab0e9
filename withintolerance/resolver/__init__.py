"""
Tolerance range resolver.

Pure functions and frozen types with no dependency on any assertion host:
normalize a tolerance argument, resolve it against an expected value, and
render the range for diagnostics.
"""

from .formatting import format_number, format_percent, format_tolerance
from .normalize import normalize_tolerance, to_tolerance
from .resolve import resolve
from .types import Pair, ResolvedRange, Single, Tolerance, is_finite_number, is_number

__all__ = [
    # types
    "Single",
    "Pair",
    "Tolerance",
    "ResolvedRange",
    "is_number",
    "is_finite_number",
    # normalization
    "to_tolerance",
    "normalize_tolerance",
    # formatting
    "format_number",
    "format_percent",
    "format_tolerance",
    # resolution
    "resolve",
]
