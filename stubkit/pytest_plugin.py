"""pytest integration for stubkit.

Registered through the ``pytest11`` entry point. Provides:

- ``make_double_set``: factory fixture; every DoubleSet it creates has its
  doubles removed at teardown.
- ``logger_mock`` / ``config_mock``: fresh mock builders per test.
- ``stubkit_config`` ini option: path (relative to the rootdir) of a YAML
  file loaded as the active stubkit configuration for the session.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from stubkit.builders import ConfigMockBuilder, LoggerMockBuilder
from stubkit.core.config import load_config, set_config
from stubkit.doubles import DoubleSet

logger = logging.getLogger(__name__)


class DoubleSetRegistry:
    """Tracks DoubleSets created during one test so they can be torn down together."""

    def __init__(self) -> None:
        self._sets: list[DoubleSet] = []

    def make(self, target: Any = None) -> DoubleSet:
        double_set = DoubleSet(target)
        self._sets.append(double_set)
        return double_set

    def close(self) -> None:
        """Remove every double, most recently created set first."""
        while self._sets:
            self._sets.pop().remove_all()


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini("stubkit_config", "Path to a stubkit YAML config file", default="")


def pytest_configure(config: pytest.Config) -> None:
    path = config.getini("stubkit_config")
    if path:
        config_path = config.rootpath / path
        set_config(load_config(config_path))
        logger.debug(f"Loaded stubkit config from {config_path}")


@pytest.fixture
def make_double_set() -> Iterator[Callable[..., DoubleSet]]:
    """Factory for DoubleSets that are cleaned up after the test."""
    registry = DoubleSetRegistry()
    yield registry.make
    registry.close()


@pytest.fixture
def logger_mock() -> LoggerMockBuilder:
    return LoggerMockBuilder()


@pytest.fixture
def config_mock() -> ConfigMockBuilder:
    return ConfigMockBuilder()
