"""Boundary-value inputs for argument validation tests.

Each provider returns fresh sample values of every basic kind except the
ones excluded, so a test can assert that a function rejects everything but
the kind it accepts:

    for value in all_but_string():
        with pytest.raises(InvalidArgumentError):
            parse_name(value)
"""

from collections.abc import Callable
from typing import Any

from stubkit.core.errors import InvalidArgumentError

KINDS = ("none", "number", "string", "boolean", "object", "array", "function")


def _sample_function(*args: Any, **kwargs: Any) -> None:
    return None


def _samples() -> list[tuple[str, Any]]:
    # Built per call so tests never share mutable samples.
    return [
        ("none", None),
        ("number", 123),
        ("string", "abc"),
        ("boolean", True),
        ("object", {}),
        ("array", []),
        ("function", _sample_function),
    ]


def all_but_selected(*kinds: str | list[str]) -> list[Any]:
    """Return one sample of every kind except the named ones.

    Args:
        kinds: Kind names to omit, as separate arguments or a single list.
            Valid kinds: none, number, string, boolean, object, array,
            function.

    Raises:
        InvalidArgumentError: If an unknown kind is named.
    """
    if len(kinds) == 1 and isinstance(kinds[0], (list, tuple)):
        kinds = tuple(kinds[0])

    for position, kind in enumerate(kinds, start=1):
        if kind not in KINDS:
            raise InvalidArgumentError(f"unknown value kind [{kind}]", position)

    return [value for kind, value in _samples() if kind not in kinds]


def _all_but(kind: str) -> Callable[..., list[Any]]:
    def provider(*extra: Any) -> list[Any]:
        return all_but_selected(kind) + list(extra)

    provider.__name__ = f"all_but_{kind}"
    provider.__doc__ = (
        f"Return samples of every kind except {kind}, followed by any extra values."
    )
    return provider


all_but_string = _all_but("string")
all_but_number = _all_but("number")
all_but_boolean = _all_but("boolean")
all_but_object = _all_but("object")
all_but_array = _all_but("array")
all_but_function = _all_but("function")
