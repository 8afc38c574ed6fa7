"""Configuration package for stubkit.

Pydantic models plus YAML loading and the process-wide active configuration.
"""

from stubkit.core.config.loader import expand_env_vars, get_config, load_config, set_config
from stubkit.core.config.models import Config, DoublesConfig, LoggingConfig

__all__ = [
    # Models
    "Config",
    "DoublesConfig",
    "LoggingConfig",
    # Loading
    "expand_env_vars",
    "get_config",
    "load_config",
    "set_config",
]
