"""Loading stubkit configuration files and holding the active configuration.

Config files are YAML. String values may reference environment variables as
``${VAR}``; every reference must resolve or loading fails.
"""

import logging
import os
import re
from pathlib import Path
from threading import Lock
from typing import Any

import yaml

from stubkit.core.config.models import Config

logger = logging.getLogger(__name__)

_ENV_REFERENCE = re.compile(r"\$\{([^}]+)\}")

_active_config: Config | None = None
_active_lock = Lock()


def _substitute(text: str, missing: set[str]) -> str:
    def lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in os.environ:
            return os.environ[name]
        missing.add(name)
        return match.group(0)

    return _ENV_REFERENCE.sub(lookup, text)


def _walk(node: Any, missing: set[str]) -> Any:
    if isinstance(node, str):
        return _substitute(node, missing)
    if isinstance(node, dict):
        return {key: _walk(value, missing) for key, value in node.items()}
    if isinstance(node, list):
        return [_walk(item, missing) for item in node]
    return node


def expand_env_vars(data: Any, source: str = "<config>") -> Any:
    """Replace ``${VAR}`` references in every string nested inside ``data``.

    Raises:
        ValueError: One or more referenced variables are not set. The message
            names all of them and the ``source`` they came from.
    """
    missing: set[str] = set()
    expanded = _walk(data, missing)
    if missing:
        names = ", ".join(sorted(missing))
        raise ValueError(f"{source}: environment variable(s) not set: {names}")
    return expanded


def load_config(path: Path | str) -> Config:
    """Read a YAML file into a Config.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: The file does not exist.
        ValueError: The top level is not a mapping, or a ``${VAR}`` is unset.
        pydantic.ValidationError: A value fails model validation.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"stubkit config not found: {config_path}")

    raw = yaml.safe_load(config_path.read_text()) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")

    config = Config.model_validate(expand_env_vars(raw, source=str(config_path)))
    logger.debug(f"Read stubkit config from {config_path}")
    return config


def get_config() -> Config:
    """Return the active configuration, creating defaults on first use."""
    global _active_config
    with _active_lock:
        if _active_config is None:
            _active_config = Config()
        return _active_config


def set_config(config: Config | None) -> None:
    """Replace the active configuration.

    Passing None drops back to defaults on the next ``get_config()``. The
    logging level of the new configuration is applied to the stubkit logger.
    """
    global _active_config
    with _active_lock:
        _active_config = config
    level = (config or Config()).logging.level
    logging.getLogger("stubkit").setLevel(level)
    logger.debug(f"Active configuration replaced (logging.level={level})")
