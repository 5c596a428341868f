"""Argument path resolution against a field's argument tree."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any, Final

from graphql_authz._types import ArgumentPath

__all__ = ["ABSENT", "resolve_argument"]


class _Absent:
    """Marker for an argument that was not supplied."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


def _step(current: Any, segment: str | int) -> Any:
    if isinstance(segment, int):
        if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                return current[segment]
            except IndexError:
                return ABSENT
        return ABSENT
    if isinstance(current, Mapping):
        return current.get(segment, ABSENT)
    if current is None or isinstance(current, (str, bytes, Number, Sequence)):
        return ABSENT
    # Input objects may be bound to Python classes instead of dicts.
    value = getattr(current, segment, ABSENT)
    return ABSENT if callable(value) else value


def resolve_argument(arguments: Mapping[str, Any], path: ArgumentPath) -> Any:
    """Extract the value at *path* from *arguments*, or ``ABSENT``.

    A string path is a top-level argument name. A list or tuple path is
    walked segment by segment: strings are keys, integers are indexes.
    ``None`` counts as absent, since GraphQL ``null`` means "not supplied"
    for scoping purposes. Values are returned as-is.

    Example::

        args = {"params": {"id": 7, "tags": ["a", "b"]}}
        resolve_argument(args, ["params", "id"])       # 7
        resolve_argument(args, ["params", "tags", 1])  # "b"
        resolve_argument(args, "id")                   # ABSENT
    """
    if isinstance(path, str):
        value = arguments.get(path, ABSENT)
    else:
        value = arguments
        for segment in path:
            value = _step(value, segment)
            if value is ABSENT:
                break
    return ABSENT if value is None else value
