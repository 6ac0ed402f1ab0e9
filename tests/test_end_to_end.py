"""
End-to-end checks through expect(): for each expected value and tolerance,
a random value inside the range and both endpoints pass, and values just
beyond either endpoint fail with the exact range description.
"""

import random

import pytest

from withintolerance import ToleranceAssertionFailure, expect
from withintolerance.resolver import format_number, format_tolerance


def _error_message(target, expected, tol_pos, tol_neg):
    return (
        f"expected {format_number(target)} to be within tolerance of "
        f"{format_tolerance(expected, tol_pos, tol_neg)}"
    )


def _check(rng, expected, tol_arg, tol_pos, tol_neg):
    if expected > 0:
        start = expected - expected * tol_neg
        finish = expected + expected * tol_pos
    else:
        start = expected + expected * tol_pos
        finish = expected - expected * tol_neg

    below = start - rng.uniform(1, 1000)
    above = finish + rng.uniform(1, 1000)

    inside = min(max(rng.uniform(start, finish), start), finish)

    expect(inside).to.be.within_tolerance_of(expected, tol_arg)
    expect(start).to.be.within_tolerance_of(expected, tol_arg)
    expect(finish).to.be.within_tolerance_of(expected, tol_arg)

    for outside in (below, above):
        with pytest.raises(ToleranceAssertionFailure) as info:
            expect(outside).to.be.within_tolerance_of(expected, tol_arg)
        assert str(info.value) == _error_message(outside, expected, tol_pos, tol_neg)


@pytest.fixture
def rng():
    return random.Random(20160101)


class TestSymmetric:
    @pytest.mark.parametrize("expected, tol", [(500, 0.05), (-2200, 0.32)])
    def test_number_tolerance(self, rng, expected, tol):
        _check(rng, expected, tol, tol, tol)
        _check(rng, expected, -tol, tol, tol)


class TestOneSided:
    @pytest.mark.parametrize("expected, tol_pos", [(350, 0.15), (-874, 0.215)])
    def test_upward(self, rng, expected, tol_pos):
        for tol_arg in ([tol_pos], [tol_pos, 0], [tol_pos, -0.0], [0, tol_pos], [-0.0, tol_pos]):
            _check(rng, expected, tol_arg, tol_pos, 0)

    @pytest.mark.parametrize("expected, tol_neg", [(555, 0.37), (-452.471, 0.113)])
    def test_downward(self, rng, expected, tol_neg):
        for tol_arg in ([-tol_neg], [-tol_neg, 0], [-tol_neg, -0.0], [0, -tol_neg], [-0.0, -tol_neg]):
            _check(rng, expected, tol_arg, 0, tol_neg)


class TestExact:
    @pytest.mark.parametrize("expected", [4553.1847, -74247.23])
    def test_zero_tolerance(self, rng, expected):
        for tol_arg in (0, -0.0, [0], [-0.0], [0, 0], [-0.0, -0.0], [0, -0.0], [-0.0, 0]):
            _check(rng, expected, tol_arg, 0, 0)


class TestAsymmetric:
    @pytest.mark.parametrize("expected, tol_pos, tol_neg", [(1000, 0.3, 0.7), (-656.26, 0.023, 0.1432)])
    def test_pair_either_order(self, rng, expected, tol_pos, tol_neg):
        _check(rng, expected, [tol_pos, -tol_neg], tol_pos, tol_neg)
        _check(rng, expected, [-tol_neg, tol_pos], tol_pos, tol_neg)

    def test_extra_elements_ignored(self, rng):
        _check(rng, 1000, [0.3, -0.7, 41, "ahsdjbf", {}, 14], 0.3, 0.7)
        _check(rng, 1000, [-0.7, 0.3, 23, 47, "dsd", {"a": 1}], 0.3, 0.7)


class TestZeroExpected:
    def test_range_is_zero(self, rng):
        _check(rng, 0, 0.541, 0.541, 0.541)
        _check(rng, 0, [0.146, -0.0745], 0.146, 0.0745)
        _check(rng, 0, 0, 0, 0)
