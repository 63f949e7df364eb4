"""Elementary functions over fixnums with exact results where they exist."""

import logging

from schemecore.schemecore_error import SchemeEvalError
from schemecore.schemecore_exactness import approximate_root, exact_shortcut, flonum_apply
from schemecore.schemecore_promotion import floor_divide, make_complex, make_integer
from schemecore.schemecore_value import (
    SchemeValue, SchemeExactInteger, SchemeInexactReal
)
from schemecore.schemecore_word_size import SchemeWordSize, WORD64


class SchemeFixnum:
    """
    Elementary functions of a fixnum argument.

    Each function returns an exact result when the mathematical answer is an
    exact integer (or exact complex), and a flonum approximation otherwise.
    Results that can outgrow a machine word are promoted to bignums.
    """

    def __init__(self, word_size: SchemeWordSize = WORD64) -> None:
        """
        Initialize the fixnum function set.

        Args:
            word_size: Width of a fixnum, used to classify promoted results
        """
        self.word_size = word_size
        self._logger = logging.getLogger("SchemeFixnum")

    def _transcendental(self, function_name: str, n: int) -> SchemeValue:
        exact = exact_shortcut(function_name, n)
        if exact is not None:
            self._logger.debug("%s(%d) is exact %d", function_name, n, exact)
            return SchemeExactInteger(exact)

        return SchemeInexactReal(flonum_apply(function_name, n))

    def atan(self, n: int) -> SchemeValue:
        """Arc tangent; always inexact."""
        return SchemeInexactReal(flonum_apply('atan', n))

    def asin(self, n: int) -> SchemeValue:
        """Arc sine; arguments outside [-1, 1] give NaN."""
        return SchemeInexactReal(flonum_apply('asin', n))

    def acos(self, n: int) -> SchemeValue:
        """Arc cosine; arguments outside [-1, 1] give NaN."""
        return SchemeInexactReal(flonum_apply('acos', n))

    def sin(self, n: int) -> SchemeValue:
        return self._transcendental('sin', n)

    def cos(self, n: int) -> SchemeValue:
        return self._transcendental('cos', n)

    def tan(self, n: int) -> SchemeValue:
        return self._transcendental('tan', n)

    def exp(self, n: int) -> SchemeValue:
        return self._transcendental('exp', n)

    def log(self, n: int) -> SchemeValue:
        """Natural logarithm; log(0) is -inf and negative arguments give NaN."""
        return self._transcendental('log', n)

    def abs(self, n: int) -> SchemeExactInteger:
        """
        Absolute value.

        The result is always exact.  The magnitude of the most negative fixnum
        does not fit in a fixnum, so that case comes back as a bignum.
        """
        return make_integer(abs(n), self.word_size)

    def integer_div(self, x: int, y: int) -> SchemeExactInteger:
        """
        Integer division rounding toward negative infinity.

        Args:
            x: Dividend
            y: Divisor

        Returns:
            The exact quotient, promoted to a bignum when it leaves the fixnum range

        Raises:
            SchemeDivisionByZeroError: If y is zero
        """
        return floor_divide(x, y, self.word_size, who="div")

    def sqrt(self, n: SchemeValue) -> SchemeValue:
        """
        Square root of an exact integer.

        Perfect squares give exact results: an exact integer for a positive
        argument or an exact pure imaginary number for a negative one.  Any
        other argument gives the flonum (or inexact complex) approximation.

        Args:
            n: Exact integer value

        Returns:
            The root

        Raises:
            SchemeEvalError: If n is not an exact integer
        """
        if not isinstance(n, SchemeExactInteger):
            raise SchemeEvalError(
                f"Function 'sqrt' requires an exact integer, got {n.type_name()}",
                who="sqrt",
                irritants=[n]
            )

        value = n.value
        if value == 0:
            return n

        if value > 0:
            root, exact = approximate_root(value)
            if exact:
                return SchemeExactInteger(int(root))

            self._logger.debug("sqrt(%d) is not a perfect square, result is inexact", value)
            return SchemeInexactReal(float(root))

        # Negative: the root is pure imaginary
        root, exact = approximate_root(-value)
        if exact:
            return make_complex(SchemeExactInteger(0), SchemeExactInteger(int(root)))

        return make_complex(SchemeInexactReal(0.0), SchemeInexactReal(float(root)))
