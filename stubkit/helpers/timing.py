"""Asynchronous glue for tests: delayed runners and callback resolvers."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from stubkit.core.errors import InvalidArgumentError
from stubkit.doubles.pending import PendingResult


def get_delayed_runner(
    task: Callable[[Any], Any], delay: float
) -> Callable[..., Awaitable[Any]]:
    """Build a coroutine function that runs ``task`` after a delay.

    The runner sleeps ``delay`` seconds, calls ``task(data)`` and returns
    ``data`` unchanged, which makes it easy to splice into an await chain.
    Exceptions raised by the task propagate to the awaiter.

    Args:
        task: Callable receiving the runner's data argument.
        delay: Non-negative delay in seconds.

    Raises:
        InvalidArgumentError: If task is not callable or delay is invalid.
    """
    if not callable(task):
        raise InvalidArgumentError("invalid task specified", 1)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise InvalidArgumentError("invalid delay specified - should be a non negative number", 2)

    async def run(data: Any = None) -> Any:
        await asyncio.sleep(delay)
        task(data)
        return data

    return run


def wait(delay: float) -> Callable[..., Awaitable[Any]]:
    """Build a runner that just waits ``delay`` seconds and passes its data through."""
    return get_delayed_runner(lambda data: data, delay)


def get_resolver(
    target: PendingResult | asyncio.Future, resolve_args: Any = None
) -> Callable[..., None]:
    """Adapt an error-first callback onto a pending result or future.

    The returned callback has the signature ``callback(err, *args)``. A truthy
    ``err`` rejects the target. Otherwise the target is resolved with
    ``resolve_args`` if given, else the single argument, a tuple of several
    arguments, or None.

    Args:
        target: PendingResult or asyncio.Future to settle.
        resolve_args: Value that overrides whatever the callback receives.

    Raises:
        InvalidArgumentError: If target is neither a PendingResult nor a Future.
    """
    if isinstance(target, PendingResult):
        settle, fail = target.settle, target.fail
    elif isinstance(target, asyncio.Future):
        settle, fail = target.set_result, target.set_exception
    else:
        raise InvalidArgumentError("invalid pending result specified for resolver", 1)

    def callback(err: BaseException | None = None, *args: Any) -> None:
        if err:
            fail(err)
        elif resolve_args is not None:
            settle(resolve_args)
        elif len(args) == 1:
            settle(args[0])
        else:
            settle(args or None)

    return callback
