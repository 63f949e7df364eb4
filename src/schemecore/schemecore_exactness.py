"""
Exactness rules for elementary functions applied to exact integers.

Transcendental functions produce inexact results except at the few
points where the mathematical answer is itself an exact integer.  Square
roots are exact whenever the argument is a perfect square, which is
established by an exact integer root and re-multiplication rather than
trusted from a floating point approximation.
"""

import math
import sys
from typing import Callable, Dict, Tuple


# Function name -> (argument that triggers the shortcut, exact result)
EXACT_SHORTCUTS: Dict[str, Tuple[int, int]] = {
    'sin': (0, 0),
    'cos': (0, 1),
    'tan': (0, 0),
    'exp': (0, 1),
    'log': (1, 0),
}

# Function name -> floating point implementation
FLONUM_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    'sin': math.sin,
    'cos': math.cos,
    'tan': math.tan,
    'asin': math.asin,
    'acos': math.acos,
    'atan': math.atan,
    'exp': math.exp,
    'log': math.log,
}


def exact_shortcut(function_name: str, value: int) -> int | None:
    """
    Look up the exact result of a function at an integer argument.

    Args:
        function_name: Elementary function name, e.g. 'sin'
        value: Exact integer argument

    Returns:
        The exact integer result, or None if the result at this argument is inexact
    """
    shortcut = EXACT_SHORTCUTS.get(function_name)
    if shortcut is None:
        return None

    trigger, result = shortcut
    if value != trigger:
        return None

    return result


def flonum_apply(function_name: str, value: int) -> float:
    """
    Evaluate a function with IEEE double semantics.

    Domain errors are not signalled: arguments outside the domain of the
    function produce NaN (or -inf for log of zero), as the C library does.

    Args:
        function_name: Elementary function name
        value: Exact integer argument

    Returns:
        The double precision result
    """
    fn = FLONUM_FUNCTIONS[function_name]
    x = float(value)
    try:
        return fn(x)

    except ValueError:
        if function_name == 'log' and x == 0.0:
            return float('-inf')

        return float('nan')

    except OverflowError:
        return float('inf')


# Largest integer a double can hold without overflowing
_MAX_FLOAT_INT = int(sys.float_info.max)


def _flonum_root(magnitude: int, floor_root: int) -> float:
    """Double precision square root of an integer that may exceed the double range."""
    if magnitude <= _MAX_FLOAT_INT:
        return math.sqrt(magnitude)

    # The integer floor root is as close as a double can get at this size
    if floor_root <= _MAX_FLOAT_INT:
        return float(floor_root)

    return math.inf


def approximate_root(magnitude: int) -> Tuple[int | float, bool]:
    """
    Compute the square root of a non-negative exact integer.

    The integer floor root is computed exactly and checked by re-multiplication;
    only when that check fails is the root approximated in double precision.

    Args:
        magnitude: Non-negative exact integer, of any size

    Returns:
        (root, exact) where root is an int when exact is True, otherwise the
        double precision approximation
    """
    if magnitude < 0:
        raise ValueError(f"Cannot take the root of negative magnitude {magnitude}")

    candidate = math.isqrt(magnitude)
    if candidate * candidate == magnitude:
        return candidate, True

    return _flonum_root(magnitude, candidate), False
