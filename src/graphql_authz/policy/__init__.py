"""Policy layer — the policy protocol, base policies and ownership rules."""

from graphql_authz.policy._base import Authorization
from graphql_authz.policy._decorator import scope_rule
from graphql_authz.policy._predicate import (
    Predicate,
    always_allow,
    always_deny,
    owns,
    predicate,
)
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.policy._registry import RuleRegistration, RuleRegistry, get_default_registry
from graphql_authz.policy._registry_policy import RegistryAuthorization

__all__ = [
    "Authorization",
    "AuthorizationPolicy",
    "Predicate",
    "RegistryAuthorization",
    "RuleRegistration",
    "RuleRegistry",
    "always_allow",
    "always_deny",
    "get_default_registry",
    "owns",
    "predicate",
    "scope_rule",
]
