"""Exception classes for the Scheme runtime core, carrying R6RS-style condition details."""

from typing import Any, List, Sequence


class SchemeError(Exception):
    """Base exception for Scheme runtime errors with detailed condition information."""

    def __init__(
        self,
        message: str,
        who: str | None = None,
        irritants: Sequence[Any] | None = None,
        context: str | None = None,
        expected: str | None = None,
        received: str | None = None,
        suggestion: str | None = None,
        example: str | None = None
    ):
        """
        Initialize detailed error.

        Args:
            message: Core error description
            who: Name of the procedure that signalled the condition
            irritants: Values that caused the condition, kept unformatted
            context: Additional context information
            expected: What was expected
            received: What was actually received
            suggestion: Suggestion for fixing the error
            example: Example of correct usage
        """
        self.message = message
        self.who = who
        self.irritants: List[Any] = list(irritants) if irritants is not None else []
        self.context = context
        self.expected = expected
        self.received = received
        self.suggestion = suggestion
        self.example = example

        super().__init__(self._format_detailed_message())

    def _describe_irritant(self, irritant: Any) -> str:
        """Render one irritant, using the Scheme representation when the value has one."""
        describe = getattr(irritant, "describe", None)
        if callable(describe):
            return describe()

        return repr(irritant)

    def _format_detailed_message(self) -> str:
        """Format the error message with all available details."""
        parts = [f"Error: {self.message}"]

        if self.who:
            parts.append(f"Who: {self.who}")

        if self.irritants:
            rendered = " ".join(self._describe_irritant(i) for i in self.irritants)
            parts.append(f"Irritants: {rendered}")

        # Add received/expected information
        if self.received:
            parts.append(f"Received: {self.received}")

        if self.expected:
            parts.append(f"Expected: {self.expected}")

        if self.context:
            parts.append(f"Context: {self.context}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        if self.example:
            parts.append(f"Example: {self.example}")

        return "\n".join(parts)


class SchemeEvalError(SchemeError):
    """Evaluation errors: wrong argument counts or argument types."""


class SchemeDivisionByZeroError(SchemeEvalError):
    """Exact integer division with a zero divisor."""

    def __init__(self, dividend: int, divisor: int, who: str | None = None):
        """
        Initialize division by zero error.

        Args:
            dividend: The value being divided
            divisor: The zero divisor
            who: Name of the procedure that attempted the division
        """
        self.dividend = dividend
        self.divisor = divisor

        super().__init__(
            message="Division by zero",
            who=who,
            irritants=[dividend, divisor],
            suggestion="Exact integers have no infinity; check the divisor before dividing",
            example="(div 7 2) → 3"
        )


class SchemeAssertionViolation(SchemeError):
    """An assertion violation raised after a collaborator reported a deferred error."""
