"""Authorization — base policy with conventional role semantics."""

from __future__ import annotations

import abc
from collections.abc import Collection, Mapping, Set
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from graphql_authz._types import ErrorPayload, Permission, Role, RuleId

if TYPE_CHECKING:
    from graphql_authz._resolution import Resolution

__all__ = ["Authorization", "permission_roles", "role_value"]


def role_value(role: Any) -> Any:
    """Normalize an Enum role to its value so ``Role.USER == "user"``."""
    return role.value if isinstance(role, Enum) else role


def permission_roles(permission: Permission) -> frozenset[Any]:
    """Return the normalized roles named by a permission declaration."""
    if isinstance(permission, (str, Enum)):
        return frozenset({role_value(permission)})
    return frozenset(role_value(role) for role in permission)


def _lookup(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key)
    return getattr(container, key, None)


class Authorization(abc.ABC):
    """Base :class:`AuthorizationPolicy` implementation.

    Roles are configured through class attributes. Subclasses must
    implement :meth:`has_user_access`, and usually override
    :meth:`get_current_user` or :meth:`get_user_role` to match their
    context shape.

    * ``all_role`` is always valid and lets anyone through, logged in or not.
    * ``super_role`` passes every role check; a field whose permission is
      exactly the super role is not scoped.

    Example::

        class AppAuthorization(Authorization):
            valid_roles_list = ("user", "admin")
            super_role = "admin"

            def has_user_access(self, user, entity, rule):
                if isinstance(entity, User):
                    return entity.id == user.id
                return False
    """

    valid_roles_list: ClassVar[Collection[Role]] = ()
    super_role: ClassVar[Role | None] = None
    all_role: ClassVar[Role] = "all"
    default_rule_name: ClassVar[RuleId] = "default"

    # -- role configuration ---------------------------------------------------

    def valid_roles(self) -> Set[Role]:
        roles = {role_value(self.all_role)}
        roles.update(role_value(role) for role in self.valid_roles_list)
        return frozenset(roles)

    def not_scoped_roles(self) -> Set[Role]:
        roles = {role_value(self.all_role)}
        if self.super_role is not None:
            roles.add(role_value(self.super_role))
        return frozenset(roles)

    def default_rule(self) -> RuleId:
        return self.default_rule_name

    # -- context access -------------------------------------------------------

    def get_current_user(self, context: Any) -> Any:
        """Return the caller stored under ``current_user`` in the context."""
        if context is None:
            return None
        return _lookup(context, "current_user")

    def get_user_role(self, user: Any) -> Role | None:
        if user is None:
            return None
        return _lookup(user, "role")

    def context_role(self, context: Any) -> Role | None:
        return self.get_user_role(self.get_current_user(context))

    # -- decisions ------------------------------------------------------------

    def role_authorized(self, user_role: Role | None, allowed: Permission) -> bool:
        """Decide whether *user_role* satisfies the declared permission."""
        if not isinstance(allowed, (str, Enum)):
            return any(self.role_authorized(user_role, role) for role in allowed)

        allowed_value = role_value(allowed)
        if allowed_value == role_value(self.all_role):
            return True
        if user_role is None:
            return False
        user_value = role_value(user_role)
        if self.super_role is not None and user_value == role_value(self.super_role):
            return True
        return user_value == allowed_value

    def is_authorized(self, resolution: Resolution, permission: Permission) -> bool:
        return self.role_authorized(self.context_role(resolution.context), permission)

    def context_user_authorized(self, context: Any, scope_entity: Any, rule: RuleId) -> bool:
        return self.has_user_access(self.get_current_user(context), scope_entity, rule)

    @abc.abstractmethod
    def has_user_access(self, user: Any, scope_entity: Any, rule: RuleId) -> bool:
        """Decide whether *user* may act on *scope_entity* under *rule*."""

    # -- messages -------------------------------------------------------------

    def unauthorized_message(self, resolution: Resolution) -> ErrorPayload:
        return "unauthorized"

    def unauthorized_query_scope_message(
        self, resolution: Resolution, type_name: str
    ) -> ErrorPayload:
        return f"Not authorized to access this {type_name.replace('_', ' ')}"
