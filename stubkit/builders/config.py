"""Mock config object builder.

The mock answers ``get("dotted.property.path")`` lookups against a private
copy of the properties it was built with, the way typical application config
objects do.
"""

import copy
from functools import reduce
from typing import Any

from stubkit.core.errors import InvalidArgumentError
from stubkit.doubles import DoubleSet


def _step(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


class ConfigMockBuilder:
    """Builds a config stand-in whose ``get`` and ``add_properties`` are call-tracked.

    Args:
        props: Initial properties. Deep-copied; anything other than a dict
            starts the mock empty.
    """

    def __init__(self, props: dict[str, Any] | None = None):
        if not isinstance(props, dict):
            props = {}
        self._props: dict[str, Any] = copy.deepcopy(props)
        self._doubles = DoubleSet()
        self._doubles.add_methods("get", self._lookup, create=True)
        self._doubles.add_methods("add_properties", self._add_from_mock, create=True)

    @property
    def mock(self) -> Any:
        """The mock config object."""
        return self._doubles.target

    @property
    def doubles(self) -> DoubleSet:
        return self._doubles

    @property
    def props(self) -> dict[str, Any]:
        """The live property store backing the mock."""
        return self._props

    def add_properties(self, props: dict[str, Any]) -> "ConfigMockBuilder":
        """Merge properties into the store; top-level keys overwrite existing ones.

        Raises:
            InvalidArgumentError: If props is not a dict.

        Returns:
            This builder, for chaining.
        """
        if not isinstance(props, dict):
            raise InvalidArgumentError("Invalid properties specified", 1)
        self._props.update(props)
        return self

    def _lookup(self, path: str) -> Any:
        if not isinstance(path, str):
            raise InvalidArgumentError("property path must be a string", 1)
        return reduce(_step, path.split("."), self._props)

    def _add_from_mock(self, props: dict[str, Any]) -> Any:
        return self.add_properties(props).mock
