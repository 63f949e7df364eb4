"""Main SchemeCore class: the entry point for calling runtime procedures."""

import logging
from typing import Any

from schemecore.schemecore_builtins import SchemeBuiltins, to_scheme
from schemecore.schemecore_fixnum import SchemeFixnum
from schemecore.schemecore_input_port import SchemeStringInputPort
from schemecore.schemecore_value import SchemeValue
from schemecore.schemecore_word_size import SchemeWordSize


class SchemeCore:
    """
    Numeric tower and regexp procedures of a Scheme runtime.

    Procedures are called by name with Scheme values (or plain Python values,
    which are converted).  Numeric procedures keep results exact whenever the
    exact answer is representable:

    - (sqrt 16) → 4, (sqrt -16) → +4i, (sqrt 15) → 3.872983346207417
    - (abs most-negative-fixnum) → a bignum
    - (sin 0) → 0, (sin 1) → 0.8414709848078965
    """

    def __init__(self, word_bits: int = 64):
        """
        Initialize the runtime core.

        Args:
            word_bits: Width of a fixnum in bits (32 or 64)
        """
        self.word_size = SchemeWordSize(bits=word_bits)
        self.fixnum = SchemeFixnum(self.word_size)
        self.builtins = SchemeBuiltins(self.fixnum)
        self._logger = logging.getLogger("SchemeCore")

    def call(self, name: str, *args: Any) -> SchemeValue:
        """
        Call a built-in procedure.

        Args:
            name: Procedure name, e.g. 'sqrt' or 'rxmatch'
            *args: Arguments as Scheme values or Python bool/int/float/str

        Returns:
            The result as a Scheme value

        Raises:
            SchemeEvalError: If the procedure is unknown or given bad arguments
            SchemeDivisionByZeroError: If div is given a zero divisor
            SchemeAssertionViolation: If the regexp engine reports an error
        """
        scheme_args = [to_scheme(arg) for arg in args]
        self._logger.debug("Calling %s with %d argument(s)", name, len(scheme_args))
        return self.builtins.call(name, scheme_args)

    def call_and_format(self, name: str, *args: Any) -> str:
        """
        Call a built-in procedure and return its result in Scheme notation.

        Raises:
            The same errors as call()
        """
        return self.call(name, *args).describe()

    def open_string_input_port(self, text: str) -> SchemeStringInputPort:
        """Create a textual input port reading from text."""
        return SchemeStringInputPort(text)
