"""Error taxonomy for stubkit.

Every error raised by the toolkit derives from ``StubkitError`` so test setup
code can catch the whole family at once. The concrete classes also inherit
from the closest builtin so ``except ValueError`` style handlers keep working.
"""

from typing import Any


class StubkitError(Exception):
    """Base class for all stubkit errors."""


class InvalidArgumentError(StubkitError, ValueError):
    """Raised when a required argument is missing or has the wrong shape.

    The message always ends with the position of the offending argument,
    e.g. ``"invalid method name specified (arg #2)"``.
    """

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} (arg #{position})"
        super().__init__(message)


class InvalidMethodError(StubkitError, AttributeError):
    """Raised when the method to double is missing and creation was not requested."""

    def __init__(self, target: Any, method_name: str):
        self.target = target
        self.method_name = method_name
        super().__init__(
            f"Cannot double [{method_name}] on {type(target).__name__}: "
            f"method does not exist or is not callable (pass create=True to add it)"
        )


class InvalidStateError(StubkitError):
    """Raised when a pending result is used in a way its current state forbids."""
