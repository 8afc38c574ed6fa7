"""Collections of method doubles installed on a single target object.

A DoubleSet owns every MethodDouble it installs, together with a ledger of
the attributes they displaced, so removing a double puts the real original
back even if the name was doubled several times in between.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from numbers import Number
from threading import RLock
from types import MappingProxyType, SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

from stubkit.core.config import get_config
from stubkit.core.errors import InvalidArgumentError
from stubkit.doubles.method import MethodDouble

logger = logging.getLogger(__name__)

_NOT_DOUBLEABLE = (str, bytes, bytearray, Number, list, tuple, set, frozenset, dict)

_MISSING = object()


@dataclass(frozen=True)
class _SavedAttribute:
    """What a target held under a name before it was first doubled."""

    value: Any = _MISSING

    @property
    def present(self) -> bool:
        return self.value is not _MISSING


def _as_names(names: str | Iterable[str]) -> list[str]:
    """Accept a single name or an iterable of names."""
    if isinstance(names, str):
        names = [names]
    elif isinstance(names, Iterable):
        names = list(names)
    else:
        raise InvalidArgumentError("method name(s) not specified or invalid", 1)

    if not all(isinstance(name, str) and name for name in names):
        raise InvalidArgumentError("method name(s) not specified or invalid", 1)
    return names


def _capture(target: Any, name: str) -> _SavedAttribute:
    try:
        own = vars(target)
    except TypeError:
        own = None

    if own is not None:
        return _SavedAttribute(own[name]) if name in own else _SavedAttribute()
    # No instance dict (e.g. __slots__): fall back to plain attribute lookup.
    return _SavedAttribute(getattr(target, name, _MISSING))


def _restore(target: Any, name: str, saved: _SavedAttribute) -> None:
    if saved.present:
        setattr(target, name, saved.value)
        return
    try:
        delattr(target, name)
    except AttributeError:
        pass


class DoubleSet:
    """Owns the method doubles attached to one target object.

    Args:
        target: Object to double methods on. None, or a value that cannot
            carry methods (numbers, strings, containers), is replaced with a
            fresh ``SimpleNamespace``.

    Usage:
        doubles = DoubleSet()
        doubles.add_async_methods("fetch")
        pending = doubles.target.fetch(42)
        doubles["fetch"].resolve("ok")

    Used as a context manager, every double is removed on exit.
    """

    def __init__(self, target: Any = None):
        if target is None or isinstance(target, _NOT_DOUBLEABLE):
            target = SimpleNamespace()
        self._target = target
        self._constructor = MagicMock(name=f"{type(target).__name__}.constructor", return_value=target)
        self._doubles: dict[str, MethodDouble] = {}
        self._originals: dict[str, _SavedAttribute] = {}
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"<DoubleSet target={type(self._target).__name__} doubles={sorted(self._doubles)}>"

    # -- accessors -----------------------------------------------------------

    @property
    def target(self) -> Any:
        """The object whose methods are doubled."""
        return self._target

    @property
    def constructor(self) -> MagicMock:
        """Callable standing in for the target's class; always returns the target."""
        return self._constructor

    @property
    def doubles(self) -> Mapping[str, MethodDouble]:
        """Read-only view of installed doubles, keyed by method name."""
        return MappingProxyType(self._doubles)

    def __getitem__(self, name: str) -> MethodDouble:
        return self._doubles[name]

    def __contains__(self, name: object) -> bool:
        return name in self._doubles

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._doubles))

    def __len__(self) -> int:
        return len(self._doubles)

    # -- installation --------------------------------------------------------

    def add_methods(
        self,
        names: str | Iterable[str],
        value: Any = None,
        create: bool | None = None,
    ) -> "DoubleSet":
        """Install immediate-mode doubles.

        Args:
            names: A method name or an iterable of names.
            value: Value returned by every call, or a callable invoked with
                each call's arguments to compute it.
            create: Create methods that do not exist. Defaults to
                ``doubles.create_missing`` from the active configuration.

        Returns:
            This DoubleSet, for chaining.
        """
        for name in _as_names(names):
            self._install(name, value, create, is_async=False)
        return self

    def add_async_methods(
        self,
        names: str | Iterable[str],
        create: bool | None = None,
    ) -> "DoubleSet":
        """Install deferred-mode doubles whose results are settled by the caller.

        Returns:
            This DoubleSet, for chaining.
        """
        for name in _as_names(names):
            self._install(name, None, create, is_async=True)
        return self

    def remove_methods(self, names: str | Iterable[str]) -> "DoubleSet":
        """Uninstall doubles and restore what the target held before.

        Names without an installed double are ignored.

        Returns:
            This DoubleSet, for chaining.
        """
        for name in _as_names(names):
            with self._lock:
                double = self._doubles.pop(name, None)
                if double is None:
                    continue
                _restore(self._target, name, self._originals.pop(name))
            logger.debug(f"Removed double for {type(self._target).__name__}.{name}")
        return self

    def remove_all(self) -> "DoubleSet":
        """Uninstall every double in this set."""
        with self._lock:
            names = list(self._doubles)
        if names:
            self.remove_methods(names)
        return self

    def _install(self, name: str, value: Any, create: bool | None, is_async: bool) -> None:
        if create is None:
            create = get_config().doubles.create_missing

        with self._lock:
            # Overwrites keep the ledger entry from the first install.
            saved = self._originals.get(name)
            if saved is None:
                saved = _capture(self._target, name)

            double = MethodDouble(
                self._target,
                name,
                value,
                create=create,
                is_async=is_async,
                lock=self._lock,
            )
            self._originals[name] = saved
            replaced = self._doubles.get(name)
            self._doubles[name] = double

        if replaced is not None:
            logger.debug(f"Replaced existing double for {type(self._target).__name__}.{name}")

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> "DoubleSet":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.remove_all()
