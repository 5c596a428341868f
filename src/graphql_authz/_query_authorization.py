"""QueryAuthorization — role gate in front of scope authorization."""

from __future__ import annotations

from typing import Literal

from graphql_authz._audit import log_role_decision
from graphql_authz._resolution import Resolution
from graphql_authz._types import ArgumentPathSpec, Permission, RuleId
from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.exceptions import InvalidPermissionError
from graphql_authz.policy._base import permission_roles
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.scope._middleware import QueryScopeAuthorization
from graphql_authz.scope._translate import apply_role_verdict

__all__ = ["QueryAuthorization", "validate_permission"]


def validate_permission(permission: Permission, policy: AuthorizationPolicy) -> None:
    """Raise :class:`InvalidPermissionError` unless every role is known."""
    valid_roles = permission_roles(policy.valid_roles())
    if not permission_roles(permission) <= valid_roles:
        raise InvalidPermissionError(permission=permission, valid_roles=valid_roles)


class QueryAuthorization:
    """Authorize one field: role check first, then scope check.

    The permission is validated against ``policy.valid_roles()`` when the
    gate is built, so a typo in a field declaration fails at setup. On a
    call, an already-resolved resolution passes through untouched. A
    failed role check resolves the field with
    ``policy.unauthorized_message()`` and the scope stage never runs.

    All scope options are forwarded to :class:`QueryScopeAuthorization`.

    Example::

        gate = QueryAuthorization(permit="user", scope=User, policy=AppAuthorization())
        resolution = gate(resolution)
        if resolution.errors:
            ...
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
        validate_permission(permit, policy)
        self.permit = permit
        self._policy = policy
        self._config = config
        self.scope_authorization = QueryScopeAuthorization(
            permit=permit,
            scope=scope,
            args=args,
            optional=optional,
            rule=rule,
            policy=policy,
            config=config,
        )

    @property
    def config(self) -> AuthzConfig:
        return self._config if self._config is not None else get_global_config()

    def __call__(self, resolution: Resolution) -> Resolution:
        if resolution.resolved:
            return resolution

        validate_permission(self.permit, self._policy)
        authorized = bool(self._policy.is_authorized(resolution, self.permit))
        if self.config.log_decisions:
            log_role_decision(
                query_name=resolution.query_name,
                permission=self.permit,
                authorized=authorized,
            )

        resolution = apply_role_verdict(authorized, resolution, policy=self._policy)
        return self.scope_authorization(resolution)
