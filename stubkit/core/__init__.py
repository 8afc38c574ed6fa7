"""Core functionality for stubkit: errors, configuration and logging."""

from stubkit.core.config import Config, get_config, load_config, set_config
from stubkit.core.errors import (
    InvalidArgumentError,
    InvalidMethodError,
    InvalidStateError,
    StubkitError,
)
from stubkit.core.logging import mute, muted, setup_logging, unmute

__all__ = [
    "Config",
    "get_config",
    "load_config",
    "set_config",
    "InvalidArgumentError",
    "InvalidMethodError",
    "InvalidStateError",
    "StubkitError",
    "mute",
    "muted",
    "setup_logging",
    "unmute",
]
