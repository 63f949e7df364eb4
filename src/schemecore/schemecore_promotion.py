"""
Promotion of native integer results into Scheme numeric values.

Results of fixnum operations such as abs and div can leave the fixnum
range (the magnitude of the most negative fixnum is the classic case).
Every such result is built here so it is always represented exactly,
widening to a bignum where needed.  Complex values are assembled here too.
"""

import logging

from schemecore.schemecore_error import SchemeDivisionByZeroError, SchemeEvalError
from schemecore.schemecore_value import (
    SchemeValue, SchemeNumber, SchemeExactInteger, SchemeInexactReal, SchemeExactComplex, SchemeInexactComplex
)
from schemecore.schemecore_word_size import SchemeWordSize


_logger = logging.getLogger("SchemePromotion")


def make_integer(value: int, word_size: SchemeWordSize) -> SchemeExactInteger:
    """
    Build the exact integer for a native result.

    Args:
        value: Integer result of a fixnum operation
        word_size: Width of a fixnum

    Returns:
        The exact integer, which is a bignum if it does not fit the word
    """
    if word_size.is_bignum(value):
        _logger.debug("Promoted %d to bignum (%d-bit fixnum range exceeded)", value, word_size.bits)

    return SchemeExactInteger(value)


def floor_divide(x: int, y: int, word_size: SchemeWordSize, who: str | None = None) -> SchemeExactInteger:
    """
    Divide two exact integers, rounding toward negative infinity.

    Args:
        x: Dividend
        y: Divisor
        word_size: Width of a fixnum
        who: Procedure name to report if the division fails

    Returns:
        The exact quotient

    Raises:
        SchemeDivisionByZeroError: If y is zero
    """
    if y == 0:
        raise SchemeDivisionByZeroError(x, y, who=who)

    return make_integer(x // y, word_size)


def _to_flonum(part: SchemeNumber) -> float:
    if isinstance(part, SchemeExactInteger):
        return float(part.value)

    if isinstance(part, SchemeInexactReal):
        return part.value

    raise SchemeEvalError(
        f"Complex part must be a real number, got {part.type_name()}",
        who="make-rectangular",
        irritants=[part]
    )


def make_complex(real: SchemeNumber, imag: SchemeNumber) -> SchemeValue:
    """
    Assemble a complex number from its parts.

    Two exact parts give an exact complex and two inexact parts an inexact
    one.  If only one part is inexact the exact part is converted, so the
    result is inexact.  An exact zero imaginary part collapses to the real
    part, which is how Scheme writes such numbers.

    Args:
        real: Real part
        imag: Imaginary part

    Returns:
        The complex value (or the real part when the imaginary part is exact zero)
    """
    if isinstance(real, SchemeExactInteger) and isinstance(imag, SchemeExactInteger):
        if imag.value == 0:
            return real

        return SchemeExactComplex(real.value, imag.value)

    real_part = _to_flonum(real)
    imag_part = _to_flonum(imag)
    if real.is_exact() != imag.is_exact():
        _logger.debug("Mixed exactness complex %s, %s made inexact", real.describe(), imag.describe())

    return SchemeInexactComplex(real_part, imag_part)
