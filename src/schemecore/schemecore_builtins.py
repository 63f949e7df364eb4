"""
Built-in procedure registry.

Maps Scheme procedure names to their implementations, checks argument
counts against an arity table, and validates that numeric arguments are
fixnums before handing them to the fixnum function set.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

from schemecore.schemecore_error import SchemeEvalError
from schemecore.schemecore_fixnum import SchemeFixnum
from schemecore.schemecore_regexp_procedures import SchemeRegexpProcedures
from schemecore.schemecore_value import (
    SchemeValue, SchemeBoolean, SchemeExactInteger, SchemeInexactReal, SchemeString
)


def to_scheme(value: Any) -> SchemeValue:
    """
    Convert a Python value into a Scheme value.

    Args:
        value: bool, int, float, str or an existing SchemeValue

    Returns:
        The equivalent Scheme value

    Raises:
        SchemeEvalError: If the value has no Scheme equivalent
    """
    if isinstance(value, SchemeValue):
        return value

    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return SchemeBoolean(value)

    if isinstance(value, int):
        return SchemeExactInteger(value)

    if isinstance(value, float):
        return SchemeInexactReal(value)

    if isinstance(value, str):
        return SchemeString(value)

    raise SchemeEvalError(f"Cannot convert Python value of type {type(value).__name__} to a Scheme value")


class SchemeBuiltins:
    """Central registry for all built-in procedures."""

    # Each entry is (min_args, max_args).
    BUILTIN_ARITIES: Dict[str, Tuple[int, Optional[int]]] = {
        'sin': (1, 1),
        'cos': (1, 1),
        'tan': (1, 1),
        'asin': (1, 1),
        'acos': (1, 1),
        'atan': (1, 1),
        'exp': (1, 1),
        'log': (1, 1),
        'sqrt': (1, 1),
        'abs': (1, 1),
        'div': (2, 2),
        'string->regexp': (1, 1),
        'regexp?': (1, 1),
        'regexp->string': (1, 1),
        'regexp-replace': (3, 3),
        'regexp-replace-all': (3, 3),
        'rxmatch': (2, 2),
        'rxmatch-start': (1, 2),
        'rxmatch-end': (1, 2),
        'rxmatch-before': (1, 2),
        'rxmatch-after': (1, 2),
        'rxmatch-substring': (1, 2),
        'reg-match-proxy': (1, 2),
    }

    def __init__(self, fixnum: SchemeFixnum) -> None:
        """
        Initialize the registry.

        Args:
            fixnum: Fixnum function set that numeric procedures dispatch to
        """
        self._fixnum = fixnum
        self._functions: Dict[str, Callable[[List[SchemeValue]], SchemeValue]] = {
            'sin': self._unary(fixnum.sin, 'sin'),
            'cos': self._unary(fixnum.cos, 'cos'),
            'tan': self._unary(fixnum.tan, 'tan'),
            'asin': self._unary(fixnum.asin, 'asin'),
            'acos': self._unary(fixnum.acos, 'acos'),
            'atan': self._unary(fixnum.atan, 'atan'),
            'exp': self._unary(fixnum.exp, 'exp'),
            'log': self._unary(fixnum.log, 'log'),
            'abs': self._unary(fixnum.abs, 'abs'),
            'sqrt': self._builtin_sqrt,
            'div': self._builtin_div,
        }
        self._functions.update(SchemeRegexpProcedures().get_functions())

        missing = set(self.BUILTIN_ARITIES) ^ set(self._functions)
        assert not missing, f"Arity table and implementations disagree: {sorted(missing)}"

    def names(self) -> List[str]:
        """Return the names of all registered procedures."""
        return sorted(self._functions)

    def has(self, name: str) -> bool:
        return name in self._functions

    def call(self, name: str, args: List[SchemeValue]) -> SchemeValue:
        """
        Call a built-in procedure.

        Args:
            name: Procedure name
            args: Argument values

        Returns:
            The procedure's result

        Raises:
            SchemeEvalError: If the procedure is unknown, or the arguments are wrong
        """
        impl = self._functions.get(name)
        if impl is None:
            raise SchemeEvalError(
                f"Unknown procedure '{name}'",
                irritants=[name],
                suggestion="Check the spelling of the procedure name"
            )

        self._check_arity(name, args)
        return impl(args)

    def _check_arity(self, name: str, args: List[SchemeValue]) -> None:
        min_args, max_args = self.BUILTIN_ARITIES[name]
        if len(args) < min_args or (max_args is not None and len(args) > max_args):
            if min_args == max_args:
                expected = f"exactly {min_args} argument{'s' if min_args != 1 else ''}"

            elif max_args is None:
                expected = f"at least {min_args} arguments"

            else:
                expected = f"between {min_args} and {max_args} arguments"

            raise SchemeEvalError(
                f"Function '{name}' requires {expected}, got {len(args)}",
                who=name,
                irritants=args
            )

    def _ensure_fixnum(self, value: SchemeValue, function_name: str) -> int:
        """Ensure value is an exact integer that fits in a fixnum, return Python int."""
        if not isinstance(value, SchemeExactInteger):
            raise SchemeEvalError(
                f"Function '{function_name}' requires fixnum arguments, got {value.type_name()}",
                who=function_name,
                irritants=[value]
            )

        if not self._fixnum.word_size.is_fixnum(value.value):
            raise SchemeEvalError(
                f"Function '{function_name}' requires fixnum arguments, got a bignum",
                who=function_name,
                irritants=[value],
                expected=f"integer in [{self._fixnum.word_size.lo}, {self._fixnum.word_size.hi}]"
            )

        return value.value

    def _unary(self, impl: Callable[[int], SchemeValue], function_name: str) -> Callable[[List[SchemeValue]], SchemeValue]:
        def builtin(args: List[SchemeValue]) -> SchemeValue:
            return impl(self._ensure_fixnum(args[0], function_name))

        return builtin

    def _builtin_sqrt(self, args: List[SchemeValue]) -> SchemeValue:
        self._ensure_fixnum(args[0], 'sqrt')
        return self._fixnum.sqrt(args[0])

    def _builtin_div(self, args: List[SchemeValue]) -> SchemeValue:
        x = self._ensure_fixnum(args[0], 'div')
        y = self._ensure_fixnum(args[1], 'div')
        return self._fixnum.integer_div(x, y)
