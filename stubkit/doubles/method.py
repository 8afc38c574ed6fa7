"""Call-tracked method doubles.

A MethodDouble replaces one named method on a target object with a
``unittest.mock.MagicMock`` whose side effect records every call and produces
the configured outcome. Immediate doubles return a value synchronously;
deferred doubles return a PendingResult per call that test code settles.

The double never restores the original method itself. Restoration belongs
to whoever installed it (normally a DoubleSet).
"""

from __future__ import annotations

import logging
import threading
from typing import Any
from unittest.mock import MagicMock

from stubkit.core.errors import InvalidArgumentError, InvalidMethodError
from stubkit.doubles.pending import PendingResult
from stubkit.model import CallRecord, DoubleMode, OutcomeSpec, outcome_of

logger = logging.getLogger(__name__)


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def _assign(target: Any, method_name: str, value: Any) -> None:
    try:
        setattr(target, method_name, value)
    except (AttributeError, TypeError) as e:
        raise InvalidArgumentError(
            f"target object does not support replacing [{method_name}]", 1
        ) from e


class MethodDouble:
    """Replaces ``target.<method_name>`` and records each call.

    Args:
        target: Object whose method is replaced.
        method_name: Name of the method to replace.
        outcome: Immediate-mode outcome. A callable is invoked with the call's
            arguments; any other value is returned as-is. Ignored in deferred
            mode.
        create: Install a no-op first when the method is missing or not
            callable. Without it such targets raise InvalidMethodError.
        is_async: Use deferred mode: every call returns a PendingResult.
        lock: Lock guarding the call log, shared with an owning DoubleSet.

    Raises:
        InvalidArgumentError: Missing target, bad method name, or a target
            that rejects attribute assignment.
        InvalidMethodError: Method missing and create is False.
    """

    def __init__(
        self,
        target: Any,
        method_name: str,
        outcome: Any = None,
        *,
        create: bool = False,
        is_async: bool = False,
        lock: threading.RLock | None = None,
    ):
        if target is None:
            raise InvalidArgumentError("target object not specified", 1)
        if not isinstance(method_name, str) or not method_name:
            raise InvalidArgumentError("invalid method name specified", 2)

        if not callable(getattr(target, method_name, None)):
            if not create:
                raise InvalidMethodError(target, method_name)
            _assign(target, method_name, _noop)

        self._target = target
        self._method_name = method_name
        self._mode = DoubleMode.DEFERRED if is_async else DoubleMode.IMMEDIATE
        self._outcome: OutcomeSpec | None = None if is_async else outcome_of(outcome)
        self._lock = lock or threading.RLock()
        self._responses: list[CallRecord] = []

        # Deferred doubles hand out resolve/reject before the first call.
        # Whichever call lands in an empty log is bound to this result.
        self._first_result: PendingResult | None = None
        if is_async:
            self._first_result = PendingResult(report_unobserved=False)

        self._stub = MagicMock(
            name=f"{type(target).__name__}.{method_name}",
            side_effect=self._invoke,
        )
        _assign(target, method_name, self._stub)
        logger.debug(f"Installed {self._mode.value} double for {type(target).__name__}.{method_name}")

    def __repr__(self) -> str:
        return (
            f"<MethodDouble {self._method_name} mode={self._mode.value} "
            f"calls={len(self._responses)}>"
        )

    def _invoke(self, *args: Any, **kwargs: Any) -> Any:
        if self._mode is DoubleMode.IMMEDIATE:
            value = self._outcome.produce(args, kwargs)
            with self._lock:
                self._responses.append(
                    CallRecord(args=args, kwargs=kwargs, is_async=False, return_value=value)
                )
            return value

        with self._lock:
            result = self._first_result if not self._responses else PendingResult()
            self._responses.append(
                CallRecord(
                    args=args,
                    kwargs=kwargs,
                    is_async=True,
                    return_value=result,
                    result=result,
                )
            )
        return result

    # -- introspection -------------------------------------------------------

    @property
    def target(self) -> Any:
        return self._target

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def mode(self) -> DoubleMode:
        return self._mode

    @property
    def is_async(self) -> bool:
        return self._mode is DoubleMode.DEFERRED

    @property
    def stub(self) -> MagicMock:
        """The underlying mock installed on the target."""
        return self._stub

    @property
    def responses(self) -> tuple[CallRecord, ...]:
        """Snapshot of every recorded call, in invocation order."""
        with self._lock:
            return tuple(self._responses)

    @property
    def call_count(self) -> int:
        return self._stub.call_count

    # -- first-call convenience ----------------------------------------------

    def _first_record(self) -> CallRecord | None:
        with self._lock:
            return self._responses[0] if self._responses else None

    @property
    def return_value(self) -> Any:
        """What the first call returned, or None before any call."""
        record = self._first_record()
        return record.return_value if record is not None else None

    @property
    def result(self) -> PendingResult | None:
        """PendingResult of the first call, available before the call happens."""
        record = self._first_record()
        return record.result if record is not None else self._first_result

    @property
    def resolve(self) -> Any:
        """Settle function for the first call's result (None in immediate mode)."""
        result = self.result
        return result.settle if result is not None else None

    @property
    def reject(self) -> Any:
        """Fail function for the first call's result (None in immediate mode)."""
        result = self.result
        return result.fail if result is not None else None

    # -- reset ---------------------------------------------------------------

    def clear_responses(self) -> None:
        """Forget all recorded calls.

        The pre-created first result is kept, so the next call after clearing
        is bound to it again.
        """
        with self._lock:
            self._responses.clear()

    def reset(self) -> None:
        """Forget all recorded calls and reset the underlying mock's call tracking."""
        self._stub.reset_mock()
        self.clear_responses()
