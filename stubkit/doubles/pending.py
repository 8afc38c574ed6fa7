"""Caller-settled pending results for deferred method doubles.

A PendingResult starts out pending and is settled exactly once, either with a
value (``settle``/``resolve``) or an error (``fail``/``reject``). It is
awaitable from any event loop, and can also be inspected synchronously with
``done()``, ``result()`` and ``exception()``.

Nothing settles a PendingResult automatically: there is no timeout, and an
abandoned result is simply garbage collected.
"""

import asyncio
import logging
from collections.abc import Callable, Generator
from threading import Lock
from typing import Any

from stubkit.core.config import get_config
from stubkit.core.errors import InvalidArgumentError, InvalidStateError
from stubkit.model import ResultState

logger = logging.getLogger(__name__)


def _set_if_pending(waiter: "asyncio.Future[None]") -> None:
    if not waiter.done():
        waiter.set_result(None)


def _wake(waiter: "asyncio.Future[None]") -> None:
    """Wake an awaiter, hopping onto its loop when settled from elsewhere."""
    loop = waiter.get_loop()
    try:
        running = asyncio.get_running_loop()
    except RuntimeError:
        running = None

    if running is loop:
        _set_if_pending(waiter)
    elif not loop.is_closed():
        loop.call_soon_threadsafe(_set_if_pending, waiter)


class PendingResult:
    """A value container settled explicitly by test code.

    Args:
        report_unobserved: Log an error if this result is rejected and then
            garbage collected without anyone awaiting it or reading it.
            Also gated by ``doubles.report_unobserved_rejections`` in the
            active configuration.
    """

    def __init__(self, *, report_unobserved: bool = True):
        self._state = ResultState.PENDING
        self._value: Any = None
        self._error: BaseException | None = None
        self._observed = False
        self._report_unobserved = (
            report_unobserved and get_config().doubles.report_unobserved_rejections
        )
        self._callbacks: list[Callable[["PendingResult"], None]] = []
        self._waiters: list[asyncio.Future[None]] = []
        self._lock = Lock()

    def __repr__(self) -> str:
        return f"<PendingResult state={self._state.value}>"

    @property
    def state(self) -> ResultState:
        return self._state

    def done(self) -> bool:
        """Return True once the result has been resolved or rejected."""
        return self._state is not ResultState.PENDING

    def settle(self, value: Any = None) -> None:
        """Resolve the result with a value.

        Raises:
            InvalidStateError: If the result was already settled.
        """
        self._transition(ResultState.RESOLVED, value=value)

    def fail(self, error: BaseException | type[BaseException]) -> None:
        """Reject the result with an exception (instance or class).

        Raises:
            InvalidArgumentError: If error is not an exception.
            InvalidStateError: If the result was already settled.
        """
        if isinstance(error, type) and issubclass(error, BaseException):
            error = error()
        if not isinstance(error, BaseException):
            raise InvalidArgumentError("rejection error must be an exception", 1)
        self._transition(ResultState.REJECTED, error=error)

    resolve = settle
    reject = fail

    def result(self) -> Any:
        """Return the resolved value, or raise the rejection error.

        Raises:
            InvalidStateError: If the result is still pending.
        """
        self._observed = True
        if self._state is ResultState.PENDING:
            raise InvalidStateError("Result is not settled yet")
        if self._state is ResultState.REJECTED:
            raise self._error
        return self._value

    def exception(self) -> BaseException | None:
        """Return the rejection error, or None if the result was resolved.

        Raises:
            InvalidStateError: If the result is still pending.
        """
        self._observed = True
        if self._state is ResultState.PENDING:
            raise InvalidStateError("Result is not settled yet")
        return self._error

    def add_done_callback(self, fn: Callable[["PendingResult"], None]) -> None:
        """Call ``fn(self)`` once settled; immediately if already settled."""
        self._observed = True
        with self._lock:
            if self._state is ResultState.PENDING:
                self._callbacks.append(fn)
                return
        fn(self)

    def __await__(self) -> Generator[Any, None, Any]:
        self._observed = True
        if self._state is ResultState.PENDING:
            waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            with self._lock:
                if self._state is ResultState.PENDING:
                    self._waiters.append(waiter)
                else:
                    waiter.set_result(None)
            try:
                yield from waiter
            finally:
                with self._lock:
                    if waiter in self._waiters:
                        self._waiters.remove(waiter)
        return self.result()

    def _transition(
        self,
        state: ResultState,
        value: Any = None,
        error: BaseException | None = None,
    ) -> None:
        with self._lock:
            if self._state is not ResultState.PENDING:
                raise InvalidStateError(f"Result already {self._state.value}")
            self._state = state
            self._value = value
            self._error = error
            callbacks, self._callbacks = self._callbacks, []
            waiters, self._waiters = self._waiters, []

        logger.debug(f"Pending result {state.value}")
        for waiter in waiters:
            _wake(waiter)
        for fn in callbacks:
            fn(self)

    def __del__(self) -> None:
        if (
            self._state is ResultState.REJECTED
            and not self._observed
            and self._report_unobserved
        ):
            logger.error(f"Rejected pending result was never observed: {self._error!r}")
