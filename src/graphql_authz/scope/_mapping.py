"""Normalization of the ``args`` option into a field -> path mapping."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from graphql_authz._types import ArgumentFieldMapping, ArgumentPath, ArgumentPathSpec

__all__ = ["normalize_arg_fields"]


def _name(field: Any) -> str:
    if isinstance(field, Enum):
        field = field.value
    if not isinstance(field, str):
        raise TypeError(f"argument field names must be strings, got {field!r}")
    return field


def _path(path: Any) -> ArgumentPath:
    if isinstance(path, (str, Enum)):
        return _name(path)
    if isinstance(path, (list, tuple)):
        return [
            segment if isinstance(segment, int) and not isinstance(segment, bool)
            else _name(segment)
            for segment in path
        ]
    raise TypeError(f"argument paths must be a name or a list of segments, got {path!r}")


def normalize_arg_fields(spec: ArgumentPathSpec) -> ArgumentFieldMapping:
    """Return ``{scope_field: argument_path}`` for any accepted ``args`` shape.

    * ``"id"`` -> ``{"id": "id"}``
    * ``["code", "group_id"]`` -> ``{"code": "code", "group_id": "group_id"}``
    * ``{"user_id": ["params", "id"]}`` -> same mapping, Enum names unwrapped

    Raises:
        TypeError: If *spec* is none of the three shapes, or a mapping
            holds a key or path segment that is not a name.
    """
    if isinstance(spec, (str, Enum)):
        name = _name(spec)
        return {name: name}
    if isinstance(spec, (list, tuple)):
        return {_name(field): _name(field) for field in spec}
    if isinstance(spec, Mapping):
        return {_name(field): _path(path) for field, path in spec.items()}
    raise TypeError(
        f"args must be a field name, a list of field names or a mapping, got {spec!r}"
    )
