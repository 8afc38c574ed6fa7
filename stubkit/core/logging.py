"""Logging configuration and log muting for stubkit."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

LOGGER_NAME = "stubkit"

_saved_disable_levels: list[int] = []


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a console handler to the stubkit logger.

    Calling this more than once replaces the previous handler rather than
    stacking a new one.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Returns:
        The configured stubkit logger.
    """
    toolkit_logger = logging.getLogger(LOGGER_NAME)
    toolkit_logger.handlers.clear()
    toolkit_logger.setLevel(getattr(logging, level.upper()))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    toolkit_logger.addHandler(console_handler)

    toolkit_logger.debug(f"Logging initialized: level={level}")
    return toolkit_logger


def mute() -> None:
    """Silence all logging output until ``unmute()`` is called.

    Calls nest: each ``mute()`` must be paired with an ``unmute()``.
    """
    _saved_disable_levels.append(logging.root.manager.disable)
    logging.disable(logging.CRITICAL)


def unmute() -> None:
    """Restore the logging state that was active before the matching ``mute()``."""
    if not _saved_disable_levels:
        return
    logging.disable(_saved_disable_levels.pop())


@contextmanager
def muted() -> Iterator[None]:
    """Context manager form of ``mute()``/``unmute()``."""
    mute()
    try:
        yield
    finally:
        unmute()
