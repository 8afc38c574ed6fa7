"""Pytest configuration and fixtures for stubkit tests."""

import pytest

from stubkit.core.config import set_config

pytest_plugins = ["pytester"]


class Calculator:
    """Small collaborator used as a doubling target."""

    def add(self, a, b):
        return a + b

    def multiply(self, a, b):
        return a * b


@pytest.fixture(autouse=True)
def reset_active_config():
    """Drop any configuration a test installed."""
    yield
    set_config(None)


@pytest.fixture
def calculator() -> Calculator:
    return Calculator()
