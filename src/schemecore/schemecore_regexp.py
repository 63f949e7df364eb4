"""
Regular expression values backed by Python's re engine.

Operations on these values never raise.  They return a SchemeResult so the
procedure layer can check for an error once the call has completed.
"""

import re
from dataclasses import dataclass, field

from schemecore.schemecore_result import SchemeResult
from schemecore.schemecore_value import SchemeValue, SchemeExactInteger, SchemeString, SCHEME_FALSE


@dataclass(frozen=True)
class SchemeRegexp(SchemeValue):
    """A compiled regular expression."""
    pattern: str
    compiled: re.Pattern = field(compare=False, repr=False)

    @classmethod
    def compile(cls, pattern: str) -> SchemeResult:
        """
        Compile a pattern.

        Args:
            pattern: Regular expression source

        Returns:
            Result holding the SchemeRegexp, or the engine's error message
        """
        try:
            compiled = re.compile(pattern)

        except re.error as e:
            return SchemeResult.failure(f"invalid regular expression: {e}", [SchemeString(pattern)])

        return SchemeResult.ok(cls(pattern, compiled))

    def to_python(self) -> re.Pattern:
        return self.compiled

    def type_name(self) -> str:
        return "regexp"

    def describe(self) -> str:
        return f"#/{self.pattern}/"

    def match(self, text: str) -> SchemeResult:
        """
        Search for the first match anywhere in text.

        Returns:
            Result holding a SchemeRegMatch, or #f when there is no match
        """
        found = self.compiled.search(text)
        if found is None:
            return SchemeResult.ok(SCHEME_FALSE)

        return SchemeResult.ok(SchemeRegMatch(text, found))

    def _substitute(self, text: str, sub: str, count: int) -> SchemeResult:
        try:
            replaced = self.compiled.sub(sub, text, count=count)

        except re.error as e:
            return SchemeResult.failure(f"invalid substitution: {e}", [SchemeString(sub)])

        return SchemeResult.ok(SchemeString(replaced))

    def replace(self, text: str, sub: str) -> SchemeResult:
        """Replace the first match in text with sub."""
        return self._substitute(text, sub, 1)

    def replace_all(self, text: str, sub: str) -> SchemeResult:
        """Replace every match in text with sub."""
        return self._substitute(text, sub, 0)


@dataclass(frozen=True)
class SchemeRegMatch(SchemeValue):
    """
    The result of a successful match.

    Group accessors are zero based and group 0 is the whole match.  A group
    that took no part in the match has start and end -1 and its string
    accessors return #f.
    """
    text: str
    found: re.Match = field(compare=False, repr=False)

    def to_python(self) -> re.Match:
        return self.found

    def type_name(self) -> str:
        return "regexp-match"

    def describe(self) -> str:
        return f"#<reg-match {self.found.group(0)!r}>"

    def group_count(self) -> int:
        """Number of groups including the whole match."""
        return self.found.re.groups + 1

    def _index_error(self, index: int) -> SchemeResult | None:
        if index < 0 or index >= self.group_count():
            return SchemeResult.failure("submatch index out of range", [SchemeExactInteger(index)])

        return None

    def match_start(self, index: int) -> SchemeResult:
        error = self._index_error(index)
        if error is not None:
            return error

        return SchemeResult.ok(SchemeExactInteger(self.found.start(index)))

    def match_end(self, index: int) -> SchemeResult:
        error = self._index_error(index)
        if error is not None:
            return error

        return SchemeResult.ok(SchemeExactInteger(self.found.end(index)))

    def match_before(self, index: int) -> SchemeResult:
        """Text preceding the group."""
        error = self._index_error(index)
        if error is not None:
            return error

        start = self.found.start(index)
        if start < 0:
            return SchemeResult.ok(SCHEME_FALSE)

        return SchemeResult.ok(SchemeString(self.text[:start]))

    def match_after(self, index: int) -> SchemeResult:
        """Text following the group."""
        error = self._index_error(index)
        if error is not None:
            return error

        end = self.found.end(index)
        if end < 0:
            return SchemeResult.ok(SCHEME_FALSE)

        return SchemeResult.ok(SchemeString(self.text[end:]))

    def match_substring(self, index: int) -> SchemeResult:
        """Text matched by the group."""
        error = self._index_error(index)
        if error is not None:
            return error

        group = self.found.group(index)
        if group is None:
            return SchemeResult.ok(SCHEME_FALSE)

        return SchemeResult.ok(SchemeString(group))
