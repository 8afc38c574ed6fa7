"""Domain models for doubled method calls."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stubkit.doubles.pending import PendingResult


class DoubleMode(StrEnum):
    """How a doubled method produces its outcome.

    IMMEDIATE doubles return a value synchronously. DEFERRED doubles return a
    PendingResult that test code settles later.
    """

    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


class ResultState(StrEnum):
    """Status values for a pending result.

    Lifecycle flow:
        pending -> resolved
        pending -> rejected
    """

    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class Fixed:
    """Outcome that returns the same value on every call."""

    value: Any = None

    def produce(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return self.value


@dataclass(frozen=True)
class Factory:
    """Outcome computed fresh from each call's arguments."""

    fn: Callable[..., Any]

    def produce(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return self.fn(*args, **kwargs)


OutcomeSpec = Fixed | Factory


def outcome_of(value: Any) -> OutcomeSpec:
    """Tag a raw outcome value.

    Explicit ``Fixed``/``Factory`` instances pass through unchanged. Any other
    callable becomes a ``Factory``; everything else is ``Fixed``. Wrap a
    callable in ``Fixed`` to have it returned as-is.
    """
    if isinstance(value, (Fixed, Factory)):
        return value
    if callable(value):
        return Factory(value)
    return Fixed(value)


@dataclass
class CallRecord:
    """Recorded evidence of one invocation of a doubled method.

    Attributes:
        args: Positional arguments, in call order.
        kwargs: Keyword arguments.
        is_async: Whether the double was in deferred mode.
        return_value: What the caller received. For deferred calls this is
            the PendingResult itself.
        result: The per-call PendingResult (deferred calls only).
    """

    args: tuple[Any, ...]
    kwargs: dict[str, Any] = field(default_factory=dict)
    is_async: bool = False
    return_value: Any = None
    result: PendingResult | None = None

    @property
    def arguments(self) -> tuple[Any, ...]:
        return self.args

    @property
    def resolve(self) -> Callable[..., None] | None:
        """Settle function for this call's result (deferred calls only)."""
        return self.result.settle if self.result is not None else None

    @property
    def reject(self) -> Callable[..., None] | None:
        """Fail function for this call's result (deferred calls only)."""
        return self.result.fail if self.result is not None else None
