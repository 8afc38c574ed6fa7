"""Small helpers for asynchronous tests."""

from stubkit.helpers.timing import get_delayed_runner, get_resolver, wait

__all__ = [
    "get_delayed_runner",
    "get_resolver",
    "wait",
]
