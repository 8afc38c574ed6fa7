"""stubkit domain models - plain dataclasses and enums with no behaviour beyond bookkeeping."""

from stubkit.model.call import (
    CallRecord,
    DoubleMode,
    Factory,
    Fixed,
    OutcomeSpec,
    ResultState,
    outcome_of,
)

__all__ = [
    "CallRecord",
    "DoubleMode",
    "Factory",
    "Fixed",
    "OutcomeSpec",
    "ResultState",
    "outcome_of",
]
