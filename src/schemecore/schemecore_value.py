"""Scheme value hierarchy - immutable runtime value types.

The numeric cases form a closed set: exact integers (fixnum or bignum),
exact complex numbers, inexact reals (flonums) and inexact complex numbers.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class SchemeValue(ABC):
    """
    Abstract base class for all Scheme runtime values.

    All runtime values are immutable.
    """

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value for operations."""

    @abstractmethod
    def type_name(self) -> str:
        """Return Scheme type name for error messages."""

    @abstractmethod
    def describe(self) -> str:
        """Describe the value using Scheme external representation."""


def format_flonum(value: float) -> str:
    """Format a double the way a Scheme printer writes flonums."""
    if math.isnan(value):
        return "+nan.0"

    if math.isinf(value):
        return "+inf.0" if value > 0 else "-inf.0"

    text = repr(value)
    if 'e' in text:
        mantissa, exponent = text.split('e')
        return f"{mantissa}e{int(exponent)}"

    return text


def _format_imaginary(imag: str) -> str:
    """Attach an explicit sign to an imaginary part."""
    if imag.startswith(('+', '-')):
        return f"{imag}i"

    return f"+{imag}i"


@dataclass(frozen=True)
class SchemeNumber(SchemeValue):
    """Common base for the four numeric cases."""

    @abstractmethod
    def is_exact(self) -> bool:
        """Check if the number is exact."""

    def is_inexact(self) -> bool:
        return not self.is_exact()


@dataclass(frozen=True)
class SchemeExactInteger(SchemeNumber):
    """Represents exact integers, whether they fit a machine word or not."""
    value: int

    def to_python(self) -> int:
        return self.value

    def type_name(self) -> str:
        return "integer"

    def describe(self) -> str:
        return str(self.value)

    def is_exact(self) -> bool:
        return True


@dataclass(frozen=True)
class SchemeInexactReal(SchemeNumber):
    """Represents flonums (IEEE doubles)."""
    value: float

    def to_python(self) -> float:
        return self.value

    def type_name(self) -> str:
        return "flonum"

    def describe(self) -> str:
        return format_flonum(self.value)

    def is_exact(self) -> bool:
        return False


@dataclass(frozen=True)
class SchemeExactComplex(SchemeNumber):
    """Represents complex numbers with exact integer parts."""
    real: int
    imag: int

    def to_python(self) -> complex:
        return complex(self.real, self.imag)

    def type_name(self) -> str:
        return "complex"

    def parts(self) -> Tuple[int, int]:
        return (self.real, self.imag)

    def describe(self) -> str:
        if abs(self.imag) == 1:
            imag_str = _format_imaginary("-" if self.imag < 0 else "")

        else:
            imag_str = _format_imaginary(str(self.imag))

        # Pure imaginary: omit the real part entirely
        if self.real == 0:
            return imag_str

        return f"{self.real}{imag_str}"

    def is_exact(self) -> bool:
        return True


@dataclass(frozen=True)
class SchemeInexactComplex(SchemeNumber):
    """Represents complex numbers with flonum parts."""
    real: float
    imag: float

    def to_python(self) -> complex:
        return complex(self.real, self.imag)

    def type_name(self) -> str:
        return "complex"

    def parts(self) -> Tuple[float, float]:
        return (self.real, self.imag)

    def describe(self) -> str:
        imag_str = _format_imaginary(format_flonum(self.imag))
        if self.real == 0.0:
            return imag_str

        return f"{format_flonum(self.real)}{imag_str}"

    def is_exact(self) -> bool:
        return False


@dataclass(frozen=True)
class SchemeBoolean(SchemeValue):
    """Represents boolean values."""
    value: bool

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"

    def describe(self) -> str:
        return "#t" if self.value else "#f"


SCHEME_TRUE = SchemeBoolean(True)
SCHEME_FALSE = SchemeBoolean(False)


@dataclass(frozen=True)
class SchemeString(SchemeValue):
    """Represents string values."""
    value: str

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"

    def _escape_string(self, s: str) -> str:
        """Escape a string for display format."""
        result = []
        for char in s:
            if char == '"':
                result.append('\\"')

            elif char == '\\':
                result.append('\\\\')

            elif char == '\n':
                result.append('\\n')

            elif char == '\t':
                result.append('\\t')

            else:
                result.append(char)

        return ''.join(result)

    def describe(self) -> str:
        return f'"{self._escape_string(self.value)}"'


@dataclass(frozen=True)
class SchemeSymbol(SchemeValue):
    """Represents symbols."""
    name: str

    def to_python(self) -> str:
        """Symbols convert to their name string."""
        return self.name

    def type_name(self) -> str:
        return "symbol"

    def describe(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


# Marker symbols for the combined match accessor
SYMBOL_BEFORE = SchemeSymbol("before")
SYMBOL_AFTER = SchemeSymbol("after")
