"""stubkit - call-tracked method doubles and other test-support utilities.

Typical use:

    from stubkit import DoubleSet

    doubles = DoubleSet(client)
    doubles.add_methods("compute", lambda x: x * 2)
    doubles.add_async_methods("fetch")
"""

from stubkit.builders import ConfigMockBuilder, LoggerMockBuilder
from stubkit.core.errors import (
    InvalidArgumentError,
    InvalidMethodError,
    InvalidStateError,
    StubkitError,
)
from stubkit.doubles import DoubleSet, MethodDouble, PendingResult
from stubkit.model import CallRecord, DoubleMode, Factory, Fixed, ResultState

__all__ = [
    # Doubles
    "DoubleSet",
    "MethodDouble",
    "PendingResult",
    # Models
    "CallRecord",
    "DoubleMode",
    "Factory",
    "Fixed",
    "ResultState",
    # Builders
    "ConfigMockBuilder",
    "LoggerMockBuilder",
    # Errors
    "InvalidArgumentError",
    "InvalidMethodError",
    "InvalidStateError",
    "StubkitError",
]
