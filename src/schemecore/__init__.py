"""Scheme runtime core: exact-aware elementary functions over fixnums, regexp procedures, string ports."""

# Main API
from schemecore.schemecore import SchemeCore

# Exceptions
from schemecore.schemecore_error import (
    SchemeError, SchemeEvalError, SchemeDivisionByZeroError, SchemeAssertionViolation
)

# Value types
from schemecore.schemecore_value import (
    SchemeValue, SchemeNumber, SchemeExactInteger, SchemeExactComplex, SchemeInexactReal, SchemeInexactComplex,
    SchemeBoolean, SchemeString, SchemeSymbol, SCHEME_TRUE, SCHEME_FALSE, SYMBOL_BEFORE, SYMBOL_AFTER
)
from schemecore.schemecore_regexp import SchemeRegexp, SchemeRegMatch
from schemecore.schemecore_result import SchemeResult

# Lower-level components (for advanced usage)
from schemecore.schemecore_word_size import SchemeWordSize, WORD32, WORD64
from schemecore.schemecore_fixnum import SchemeFixnum
from schemecore.schemecore_promotion import make_integer, floor_divide, make_complex
from schemecore.schemecore_exactness import approximate_root, exact_shortcut
from schemecore.schemecore_builtins import SchemeBuiltins, to_scheme
from schemecore.schemecore_regexp_procedures import SchemeRegexpProcedures
from schemecore.schemecore_input_port import SchemeStringInputPort


__all__ = [
    # Main API
    "SchemeCore",

    # Exceptions
    "SchemeError", "SchemeEvalError", "SchemeDivisionByZeroError", "SchemeAssertionViolation",

    # Value types
    "SchemeValue", "SchemeNumber", "SchemeExactInteger", "SchemeExactComplex", "SchemeInexactReal",
    "SchemeInexactComplex", "SchemeBoolean", "SchemeString", "SchemeSymbol",
    "SCHEME_TRUE", "SCHEME_FALSE", "SYMBOL_BEFORE", "SYMBOL_AFTER",
    "SchemeRegexp", "SchemeRegMatch", "SchemeResult",

    # Lower-level components
    "SchemeWordSize", "WORD32", "WORD64", "SchemeFixnum",
    "make_integer", "floor_divide", "make_complex", "approximate_root", "exact_shortcut",
    "SchemeBuiltins", "to_scheme", "SchemeRegexpProcedures", "SchemeStringInputPort",
]
