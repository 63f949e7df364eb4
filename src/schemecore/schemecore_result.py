"""Result of a collaborator operation that reports errors after the fact."""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple


@dataclass(frozen=True)
class SchemeResult:
    """
    Outcome of an operation on a collaborator such as the regexp engine.

    The operation does not raise.  Instead the caller inspects is_error()
    once the call returns and turns the error descriptor into a condition
    of its own, naming itself as the procedure at fault.
    """
    value: Any = None
    error_message: str | None = None
    irritants: Tuple[Any, ...] = ()

    @classmethod
    def ok(cls, value: Any) -> 'SchemeResult':
        return cls(value=value)

    @classmethod
    def failure(cls, message: str, irritants: Sequence[Any] = ()) -> 'SchemeResult':
        return cls(error_message=message, irritants=tuple(irritants))

    def is_error(self) -> bool:
        """Check if the operation reported an error."""
        return self.error_message is not None
