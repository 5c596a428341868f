"""Translate verdicts into resolution results."""

from __future__ import annotations

from graphql_authz._introspection import result_type_name
from graphql_authz._resolution import Resolution
from graphql_authz.policy._protocol import AuthorizationPolicy

__all__ = ["apply_role_verdict", "apply_scope_verdict"]


def apply_role_verdict(
    verdict: bool, resolution: Resolution, *, policy: AuthorizationPolicy
) -> Resolution:
    """Leave *resolution* untouched on success, else put the role denial."""
    if verdict:
        return resolution
    return resolution.put_result(("error", policy.unauthorized_message(resolution)))


def apply_scope_verdict(
    verdict: bool, resolution: Resolution, *, policy: AuthorizationPolicy
) -> Resolution:
    """Leave *resolution* untouched on success, else put the scope denial.

    The policy authors the message; it receives the name of the field's
    result type with list and non-null wrappers removed.
    """
    if verdict:
        return resolution
    type_name = result_type_name(resolution.definition.type)
    message = policy.unauthorized_query_scope_message(resolution, type_name)
    return resolution.put_result(("error", message))
