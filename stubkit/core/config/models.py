"""Pydantic configuration models for stubkit.

For loading logic, see loader.py.
"""

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Configuration for the toolkit's own log output."""

    level: str = Field(default="WARNING", description="Logging level for the stubkit logger")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(_LOG_LEVELS)}")
        return level


class DoublesConfig(BaseModel):
    """Defaults applied when installing method doubles."""

    create_missing: bool = Field(
        default=False, description="Create missing methods when no create flag is passed"
    )
    report_unobserved_rejections: bool = Field(
        default=True, description="Log rejected pending results that nobody awaited"
    )


class Config(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    doubles: DoublesConfig = Field(default_factory=DoublesConfig)
