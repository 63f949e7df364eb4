"""Tests for exact and inexact square roots of fixnums."""

import math

import pytest

from schemecore import (
    SchemeEvalError, SchemeExactComplex, SchemeExactInteger, SchemeInexactComplex, SchemeInexactReal, SchemeString
)


class TestSqrtScenario:
    """The four cases of sqrt: perfect square or not, positive or negative."""

    def test_perfect_square(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(16)) == SchemeExactInteger(4)

    def test_non_square(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(15)) == SchemeInexactReal(3.872983346207417)

    def test_negative_perfect_square(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(-16)) == SchemeExactComplex(0, 4)

    def test_negative_non_square(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(-15)) == SchemeInexactComplex(0.0, 3.872983346207417)


class TestSqrtEdgeCases:
    """Boundary arguments for sqrt."""

    def test_zero_returned_unchanged(self, fixnum):
        zero = SchemeExactInteger(0)
        assert fixnum.sqrt(zero) is zero

    def test_one(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(1)) == SchemeExactInteger(1)

    def test_minus_one_is_exact_i(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(-1))
        assert result == SchemeExactComplex(0, 1)
        assert result.describe() == "+i"

    def test_two_is_inexact(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(2)) == SchemeInexactReal(math.sqrt(2.0))

    def test_largest_square_below_64_bit_limit(self, fixnum):
        root = math.isqrt(2**63 - 1)
        assert fixnum.sqrt(SchemeExactInteger(root * root)) == SchemeExactInteger(root)

    def test_negative_largest_square(self, fixnum):
        root = math.isqrt(2**63 - 1)
        assert fixnum.sqrt(SchemeExactInteger(-(root * root))) == SchemeExactComplex(0, root)

    def test_neighbours_of_large_square_are_inexact(self, fixnum):
        """Test that values next to a large perfect square are not mistaken for squares."""
        root = math.isqrt(2**63 - 1)
        for n in (root * root - 1, root * root + 1):
            assert isinstance(fixnum.sqrt(SchemeExactInteger(n)), SchemeInexactReal)

    def test_most_positive_fixnum(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(2**63 - 1))
        assert isinstance(result, SchemeInexactReal)
        assert math.isclose(result.value, math.sqrt(2**63 - 1))

    def test_most_negative_fixnum(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(-2**63))
        assert isinstance(result, SchemeInexactComplex)
        assert result.real == 0.0
        assert math.isclose(result.imag, math.sqrt(2.0**63))

    def test_32_bit_boundary_square(self, fixnum32):
        assert fixnum32.sqrt(SchemeExactInteger(46340 * 46340)) == SchemeExactInteger(46340)

    def test_exactness_of_results(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(49)).is_exact()
        assert fixnum.sqrt(SchemeExactInteger(-49)).is_exact()
        assert fixnum.sqrt(SchemeExactInteger(50)).is_inexact()
        assert fixnum.sqrt(SchemeExactInteger(-50)).is_inexact()

    @pytest.mark.parametrize("value", [SchemeInexactReal(4.0), SchemeString("4")])
    def test_non_integer_argument_rejected(self, fixnum, value):
        with pytest.raises(SchemeEvalError, match="requires an exact integer"):
            fixnum.sqrt(value)


class TestSqrtBignums:
    """Exact integer arguments beyond the fixnum range and beyond the double range."""

    def test_bignum_square_is_exact(self, fixnum):
        root = 2**80 + 12345
        assert fixnum.sqrt(SchemeExactInteger(root * root)) == SchemeExactInteger(1208925819614629174718521)

    def test_negative_bignum_square_is_exact_imaginary(self, fixnum):
        root = 3**100
        assert fixnum.sqrt(SchemeExactInteger(-(root * root))) == SchemeExactComplex(0, root)

    def test_neighbour_of_bignum_square_is_inexact(self, fixnum):
        root = 2**80 + 12345
        result = fixnum.sqrt(SchemeExactInteger(root * root + 1))
        assert isinstance(result, SchemeInexactReal)
        assert math.isclose(result.value, float(root))

    def test_square_beyond_double_range(self, fixnum):
        assert fixnum.sqrt(SchemeExactInteger(10**400)) == SchemeExactInteger(10**200)

    def test_non_square_beyond_double_range(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(10**400 + 1))
        assert isinstance(result, SchemeInexactReal)
        assert math.isclose(result.value, 1e200)

    def test_negative_non_square_beyond_double_range(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(-(10**400 + 1)))
        assert isinstance(result, SchemeInexactComplex)
        assert math.isclose(result.imag, 1e200)

    def test_root_beyond_double_range_is_infinite(self, fixnum):
        result = fixnum.sqrt(SchemeExactInteger(10**700 + 1))
        assert result == SchemeInexactReal(math.inf)
