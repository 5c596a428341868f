"""Scope authorization — ownership checks on the entity a field targets."""

from graphql_authz.scope._dispatch import build_scope_entity, has_user_access
from graphql_authz.scope._mapping import normalize_arg_fields
from graphql_authz.scope._middleware import QueryScopeAuthorization
from graphql_authz.scope._paths import ABSENT, resolve_argument
from graphql_authz.scope._probe import build_scope_probe
from graphql_authz.scope._translate import apply_role_verdict, apply_scope_verdict

__all__ = [
    "ABSENT",
    "QueryScopeAuthorization",
    "apply_role_verdict",
    "apply_scope_verdict",
    "build_scope_entity",
    "build_scope_probe",
    "has_user_access",
    "normalize_arg_fields",
    "resolve_argument",
]
