"""RegistryAuthorization — ownership decisions from registered rules."""

from __future__ import annotations

from typing import Any

from graphql_authz._audit import log_missing_rule
from graphql_authz._types import RuleId
from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.exceptions import NoRuleError
from graphql_authz.policy._base import Authorization
from graphql_authz.policy._registry import RuleRegistry, get_default_registry

__all__ = ["RegistryAuthorization"]


class RegistryAuthorization(Authorization):
    """Authorization whose ownership checks come from a :class:`RuleRegistry`.

    Access is granted when any rule registered for
    ``(type(scope_entity), rule)`` grants it. With no registered rule the
    check is denied, or raises :class:`NoRuleError` when the config says
    ``on_missing_rule="raise"``.

    Example::

        class AppAuthorization(RegistryAuthorization):
            valid_roles_list = ("user", "admin")
            super_role = "admin"

        @scope_rule(User)
        def own_user(user, entity):
            return entity.id == user.id

        middleware = AuthorizationMiddleware(AppAuthorization())
    """

    def __init__(
        self,
        *,
        registry: RuleRegistry | None = None,
        config: AuthzConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config

    @property
    def registry(self) -> RuleRegistry:
        return self._registry if self._registry is not None else get_default_registry()

    @property
    def config(self) -> AuthzConfig:
        return self._config if self._config is not None else get_global_config()

    def has_user_access(self, user: Any, scope_entity: Any, rule: RuleId) -> bool:
        scope = type(scope_entity)
        registrations = self.registry.lookup(scope, rule)
        if not registrations:
            if self.config.on_missing_rule == "raise":
                raise NoRuleError(scope=scope.__name__, rule=rule)
            log_missing_rule(scope=scope, rule=rule, user=user)
            return False
        return any(registration.fn(user, scope_entity) for registration in registrations)
