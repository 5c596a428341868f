"""QueryScopeAuthorization — the ownership stage of field authorization."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from graphql_authz._audit import log_scope_decision
from graphql_authz._resolution import Resolution
from graphql_authz._types import ArgumentPathSpec, Permission, RuleId
from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.exceptions import EmptyScopeProbe, ScopeNotConfigured
from graphql_authz.policy._base import permission_roles, role_value
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.scope._dispatch import has_user_access, validate_scope_fields
from graphql_authz.scope._mapping import normalize_arg_fields
from graphql_authz.scope._probe import build_scope_probe
from graphql_authz.scope._translate import apply_scope_verdict

__all__ = ["QueryScopeAuthorization"]


class QueryScopeAuthorization:
    """Check that the caller may act on the entity the arguments reference.

    Normally reached through :class:`~graphql_authz.QueryAuthorization`,
    which runs it after a successful role check.

    Args:
        permit: The field's permission; exempt roles skip scoping.
        scope: The scope entity type, ``False`` to disable scoping, or
            ``None`` (an error unless the permission is exempt).
        args: Argument spec: a field name, a list of names, or a mapping
            ``{scope_field: argument_path}``. Defaults to the config's
            ``default_args`` (``"id"``).
        optional: Accept absent arguments. An entirely empty probe then
            grants access without asking the policy.
        rule: Ownership rule name. Defaults to ``policy.default_rule()``.
        policy: The :class:`AuthorizationPolicy` deciding ownership.
        config: Optional config. Defaults to the global config.

    Example::

        scope = QueryScopeAuthorization(
            permit="user",
            scope=User,
            args={"id": ["params", "id"]},
            rule="accept_user",
            policy=AppAuthorization(),
        )
        scope(resolution)
    """

    def __init__(
        self,
        *,
        permit: Permission,
        scope: type | Literal[False] | None = None,
        args: ArgumentPathSpec | None = None,
        optional: bool | None = None,
        rule: RuleId | None = None,
        policy: AuthorizationPolicy,
        config: AuthzConfig | None = None,
    ) -> None:
        effective = config if config is not None else get_global_config()
        self.permit = permit
        self.scope = scope
        self.arg_fields = normalize_arg_fields(args if args is not None else effective.default_args)
        self.optional = optional if optional is not None else effective.default_optional
        self.rule = rule
        self._policy = policy
        self._config = config

        if isinstance(scope, type) and not self.exempt:
            if not self.arg_fields and not self.optional:
                raise EmptyScopeProbe(scope=scope)
            if effective.validate_scope_fields:
                validate_scope_fields(scope, self.arg_fields)

    @property
    def config(self) -> AuthzConfig:
        return self._config if self._config is not None else get_global_config()

    @property
    def exempt(self) -> bool:
        """Whether the permission is a single role exempt from scoping.

        A list permission is always scoped, even when each of its roles
        would be exempt on its own.
        """
        if not isinstance(self.permit, (str, Enum)):
            return False
        return role_value(self.permit) in permission_roles(self._policy.not_scoped_roles())

    def __call__(self, resolution: Resolution) -> Resolution:
        if resolution.resolved or self.scope is False or self.exempt:
            return resolution

        return self.scope_user(resolution)

    def scope_user(self, resolution: Resolution) -> Resolution:
        """Run probe building, ownership dispatch and result translation."""
        scope: Any = self.scope
        if not isinstance(scope, type):
            raise ScopeNotConfigured(query_name=resolution.query_name)

        rule = self.rule if self.rule is not None else self._policy.default_rule()
        probe = build_scope_probe(resolution, self.arg_fields, self.optional)
        verdict = has_user_access(
            probe, scope, resolution.context, rule, self.optional, policy=self._policy
        )

        if self.config.log_decisions:
            log_scope_decision(
                query_name=resolution.query_name,
                scope=scope,
                rule=rule,
                probe=probe,
                authorized=verdict,
            )

        return apply_scope_verdict(verdict, resolution, policy=self._policy)
