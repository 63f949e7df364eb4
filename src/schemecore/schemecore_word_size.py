"""
Machine word sizes for fixnums.

A word size defines the range of exact integers that fit in a native
machine word.  Values outside the range are still exact, they just have
to be represented as bignums.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SchemeWordSize:
    """A signed two's complement integer width."""

    bits: int

    def __post_init__(self) -> None:
        if self.bits not in (32, 64):
            raise ValueError(f"Word size must be 32 or 64 bits, got {self.bits}")

    @property
    def lo(self) -> int:
        """Most negative fixnum."""
        return -(1 << (self.bits - 1))

    @property
    def hi(self) -> int:
        """Most positive fixnum."""
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def is_fixnum(self, value: int) -> bool:
        """Check if an exact integer fits in a fixnum of this width."""
        return self.contains(value)

    def is_bignum(self, value: int) -> bool:
        """Check if an exact integer needs arbitrary precision at this width."""
        return not self.contains(value)


WORD32 = SchemeWordSize(bits=32)
WORD64 = SchemeWordSize(bits=64)
