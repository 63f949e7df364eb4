"""Scheme procedures for regular expressions and match results."""

import logging
from typing import Callable, Dict, List

from schemecore.schemecore_error import SchemeAssertionViolation, SchemeEvalError
from schemecore.schemecore_regexp import SchemeRegexp, SchemeRegMatch
from schemecore.schemecore_result import SchemeResult
from schemecore.schemecore_value import (
    SchemeValue, SchemeBoolean, SchemeExactInteger, SchemeString, SYMBOL_AFTER, SYMBOL_BEFORE, SCHEME_FALSE
)


class SchemeRegexpProcedures:
    """
    Regexp built-in procedures.

    Argument counts are checked by the registry before these run.
    The regexp values report failures through a SchemeResult rather than by
    raising.  Each procedure checks the result after the call and, if the
    engine reported an error, raises an assertion violation naming itself.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger("SchemeRegexpProcedures")

    def get_functions(self) -> Dict[str, Callable[[List[SchemeValue]], SchemeValue]]:
        """Return dictionary of regexp procedure implementations."""
        return {
            'string->regexp': self._builtin_string_to_regexp,
            'regexp?': self._builtin_regexp_p,
            'regexp->string': self._builtin_regexp_to_string,
            'regexp-replace': self._builtin_regexp_replace,
            'regexp-replace-all': self._builtin_regexp_replace_all,
            'rxmatch': self._builtin_rxmatch,
            'rxmatch-start': self._builtin_rxmatch_start,
            'rxmatch-end': self._builtin_rxmatch_end,
            'rxmatch-before': self._builtin_rxmatch_before,
            'rxmatch-after': self._builtin_rxmatch_after,
            'rxmatch-substring': self._builtin_rxmatch_substring,
            'reg-match-proxy': self._builtin_reg_match_proxy,
        }

    def _check_result(self, result: SchemeResult, procedure_name: str) -> SchemeValue:
        """Raise the deferred error carried by result, or return its value."""
        if result.is_error():
            self._logger.debug("%s reported: %s", procedure_name, result.error_message)
            raise SchemeAssertionViolation(
                result.error_message or "regexp error",
                who=procedure_name,
                irritants=result.irritants
            )

        return result.value

    def _ensure_regexp(self, value: SchemeValue, procedure_name: str) -> SchemeRegexp:
        if not isinstance(value, SchemeRegexp):
            raise SchemeEvalError(
                f"Function '{procedure_name}' requires a regexp, got {value.type_name()}",
                who=procedure_name,
                irritants=[value]
            )

        return value

    def _ensure_reg_match(self, value: SchemeValue, procedure_name: str) -> SchemeRegMatch:
        if not isinstance(value, SchemeRegMatch):
            raise SchemeEvalError(
                f"Function '{procedure_name}' requires a regexp match, got {value.type_name()}",
                who=procedure_name,
                irritants=[value]
            )

        return value

    def _ensure_string(self, value: SchemeValue, procedure_name: str) -> str:
        if not isinstance(value, SchemeString):
            raise SchemeEvalError(
                f"Function '{procedure_name}' requires string arguments, got {value.type_name()}",
                who=procedure_name,
                irritants=[value]
            )

        return value.value

    def _ensure_index(self, value: SchemeValue, procedure_name: str) -> int:
        if not isinstance(value, SchemeExactInteger):
            raise SchemeEvalError(
                f"Function '{procedure_name}' requires an integer group index, got {value.type_name()}",
                who=procedure_name,
                irritants=[value]
            )

        return value.value

    def _builtin_string_to_regexp(self, args: List[SchemeValue]) -> SchemeValue:
        pattern = self._ensure_string(args[0], "string->regexp")
        return self._check_result(SchemeRegexp.compile(pattern), "string->regexp")

    def _builtin_regexp_p(self, args: List[SchemeValue]) -> SchemeValue:
        return SchemeBoolean(isinstance(args[0], SchemeRegexp))

    def _builtin_regexp_to_string(self, args: List[SchemeValue]) -> SchemeValue:
        regexp = self._ensure_regexp(args[0], "regexp->string")
        return SchemeString(regexp.pattern)

    def _builtin_regexp_replace(self, args: List[SchemeValue]) -> SchemeValue:
        regexp = self._ensure_regexp(args[0], "regexp-replace")
        text = self._ensure_string(args[1], "regexp-replace")
        sub = self._ensure_string(args[2], "regexp-replace")
        return self._check_result(regexp.replace(text, sub), "regexp-replace")

    def _builtin_regexp_replace_all(self, args: List[SchemeValue]) -> SchemeValue:
        regexp = self._ensure_regexp(args[0], "regexp-replace-all")
        text = self._ensure_string(args[1], "regexp-replace-all")
        sub = self._ensure_string(args[2], "regexp-replace-all")
        return self._check_result(regexp.replace_all(text, sub), "regexp-replace-all")

    def _builtin_rxmatch(self, args: List[SchemeValue]) -> SchemeValue:
        """Implement rxmatch: the match object, or #f if nothing matched."""
        regexp = self._ensure_regexp(args[0], "rxmatch")
        text = self._ensure_string(args[1], "rxmatch")
        return self._check_result(regexp.match(text), "rxmatch")

    def _match_accessor(
        self,
        args: List[SchemeValue],
        procedure_name: str,
        accessor: Callable[[SchemeRegMatch, int], SchemeResult]
    ) -> SchemeValue:
        """
        Shared body of the rxmatch-* accessors.

        A failed match (#f) passes straight through so accessors can be
        applied directly to the result of rxmatch.  The group index defaults
        to 0, the whole match.
        """
        if args[0] == SCHEME_FALSE:
            return SCHEME_FALSE

        reg_match = self._ensure_reg_match(args[0], procedure_name)
        index = self._ensure_index(args[1], procedure_name) if len(args) == 2 else 0
        return self._check_result(accessor(reg_match, index), procedure_name)

    def _builtin_rxmatch_start(self, args: List[SchemeValue]) -> SchemeValue:
        return self._match_accessor(args, "rxmatch-start", SchemeRegMatch.match_start)

    def _builtin_rxmatch_end(self, args: List[SchemeValue]) -> SchemeValue:
        return self._match_accessor(args, "rxmatch-end", SchemeRegMatch.match_end)

    def _builtin_rxmatch_before(self, args: List[SchemeValue]) -> SchemeValue:
        return self._match_accessor(args, "rxmatch-before", SchemeRegMatch.match_before)

    def _builtin_rxmatch_after(self, args: List[SchemeValue]) -> SchemeValue:
        return self._match_accessor(args, "rxmatch-after", SchemeRegMatch.match_after)

    def _builtin_rxmatch_substring(self, args: List[SchemeValue]) -> SchemeValue:
        return self._match_accessor(args, "rxmatch-substring", SchemeRegMatch.match_substring)

    def _builtin_reg_match_proxy(self, args: List[SchemeValue]) -> SchemeValue:
        """
        Implement the combined accessor used when a match object is applied.

        (m 'before) and (m 'after) give the text around the whole match;
        (m) and (m i) give the text of group i.
        """
        if len(args) == 2 and args[1] == SYMBOL_AFTER:
            return self._builtin_rxmatch_after(args[:1])

        if len(args) == 2 and args[1] == SYMBOL_BEFORE:
            return self._builtin_rxmatch_before(args[:1])

        return self._builtin_rxmatch_substring(args)
