"""Scope probe construction from a resolution's arguments."""

from __future__ import annotations

from graphql_authz._resolution import Resolution
from graphql_authz._types import ArgumentFieldMapping, ScopeProbe
from graphql_authz.exceptions import ScopeArgumentNotFound
from graphql_authz.scope._paths import ABSENT, resolve_argument

__all__ = ["build_scope_probe"]


def build_scope_probe(
    resolution: Resolution,
    arg_fields: ArgumentFieldMapping,
    optional: bool,
) -> ScopeProbe:
    """Collect ``(scope_field, value)`` pairs for every mapped argument.

    Absent arguments are skipped when *optional* is true. Otherwise an
    absent argument is a setup fault and raises.

    Args:
        resolution: The in-flight resolution whose arguments are searched.
        arg_fields: Normalized ``{scope_field: argument_path}`` mapping.
        optional: Whether absent arguments are acceptable.

    Returns:
        The probe, empty only when *optional* is true and nothing was found.

    Raises:
        ScopeArgumentNotFound: A required argument is absent.
    """
    probe: ScopeProbe = []
    for scope_field, arg_path in arg_fields.items():
        value = resolve_argument(resolution.arguments, arg_path)
        if value is not ABSENT:
            probe.append((scope_field, value))
        elif not optional:
            raise ScopeArgumentNotFound(
                scope_field=scope_field,
                argument_path=arg_path,
                query_name=resolution.query_name,
                arguments=resolution.arguments,
            )
    return probe
