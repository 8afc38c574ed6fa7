"""Builders for commonly mocked collaborators."""

from stubkit.builders.config import ConfigMockBuilder
from stubkit.builders.logger import LOG_METHODS, LoggerMockBuilder

__all__ = [
    "ConfigMockBuilder",
    "LOG_METHODS",
    "LoggerMockBuilder",
]
