"""Mock logger builder."""

from typing import Any

from stubkit.doubles import DoubleSet

LOG_METHODS = ("debug", "info", "warning", "error", "critical", "exception", "log")


class LoggerMockBuilder:
    """Builds a stand-in for ``logging.Logger`` with every call recorded.

    ``getChild`` returns the mock itself, so child loggers share one call log.
    """

    def __init__(self) -> None:
        self._doubles = DoubleSet()
        self._doubles.add_methods(LOG_METHODS, None, create=True)
        self._doubles.add_methods("getChild", lambda *args, **kwargs: self.mock, create=True)

    @property
    def mock(self) -> Any:
        """The mock logger object."""
        return self._doubles.target

    @property
    def doubles(self) -> DoubleSet:
        """The DoubleSet holding the logger's method doubles."""
        return self._doubles
