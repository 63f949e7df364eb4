"""
Property-based tests using Hypothesis.

These cover the whole 64-bit fixnum range, where exhaustive checking is
infeasible and float rounding of large squares matters.
"""

import math

from hypothesis import given, assume
from hypothesis.strategies import integers, just, tuples

from schemecore import (
    SchemeExactComplex, SchemeExactInteger, SchemeFixnum, SchemeInexactComplex, SchemeInexactReal, WORD64
)


MAX_ROOT = math.isqrt(WORD64.hi)

fixnum = SchemeFixnum(WORD64)


def fixnums():
    """Hypothesis strategy that generates 64-bit fixnums."""
    return integers(min_value=WORD64.lo, max_value=WORD64.hi)


def non_squares():
    """Hypothesis strategy for positive integers strictly between k*k and (k+1)*(k+1)."""
    return integers(min_value=1, max_value=MAX_ROOT - 1).flatmap(
        lambda k: tuples(just(k), integers(min_value=1, max_value=2 * k))
    ).map(lambda pair: pair[0] * pair[0] + pair[1])


class TestSqrtProperties:

    @given(k=integers(min_value=0, max_value=MAX_ROOT))
    def test_square_has_exact_root(self, k):
        assert fixnum.sqrt(SchemeExactInteger(k * k)) == SchemeExactInteger(k)

    @given(k=integers(min_value=MAX_ROOT, max_value=2**600))
    def test_bignum_square_has_exact_root(self, k):
        assert fixnum.sqrt(SchemeExactInteger(k * k)) == SchemeExactInteger(k)

    @given(k=integers(min_value=1, max_value=MAX_ROOT))
    def test_negative_square_has_exact_imaginary_root(self, k):
        assert fixnum.sqrt(SchemeExactInteger(-(k * k))) == SchemeExactComplex(0, k)

    @given(n=non_squares())
    def test_non_square_is_inexact(self, n):
        result = fixnum.sqrt(SchemeExactInteger(n))
        assert isinstance(result, SchemeInexactReal)
        assert math.isclose(result.value, math.sqrt(n), rel_tol=1e-15)

    @given(n=non_squares())
    def test_negative_non_square_is_inexact_complex(self, n):
        result = fixnum.sqrt(SchemeExactInteger(-n))
        assert isinstance(result, SchemeInexactComplex)
        assert result.real == 0.0
        assert math.isclose(result.imag, math.sqrt(n), rel_tol=1e-15)

    @given(n=fixnums())
    def test_sqrt_is_idempotent(self, n):
        first = fixnum.sqrt(SchemeExactInteger(n))
        assert first == fixnum.sqrt(SchemeExactInteger(n))


class TestAbsDivProperties:

    @given(n=fixnums())
    def test_abs_is_exact_and_non_negative(self, n):
        result = fixnum.abs(n)
        assert isinstance(result, SchemeExactInteger)
        assert result.value >= 0
        assert result.value in (n, -n)

    @given(x=fixnums(), y=fixnums())
    def test_div_floors(self, x, y):
        assume(y != 0)
        q = fixnum.integer_div(x, y).value
        # Floor division: q*y <= x < (q+1)*y for positive y, reversed for negative y
        remainder = x - q * y
        assert remainder == 0 or (remainder > 0) == (y > 0)
        assert abs(remainder) < abs(y)


class TestTranscendentalProperties:

    @given(n=fixnums())
    def test_sin_exact_only_at_zero(self, n):
        result = fixnum.sin(n)
        assert result.is_exact() == (n == 0)

    @given(n=fixnums())
    def test_log_exact_only_at_one(self, n):
        assert fixnum.log(n).is_exact() == (n == 1)
