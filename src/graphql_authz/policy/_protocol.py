"""AuthorizationPolicy — the capability set every policy implements."""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from graphql_authz._types import ErrorPayload, Permission, Role, RuleId

if TYPE_CHECKING:
    from graphql_authz._resolution import Resolution

__all__ = ["AuthorizationPolicy"]


@runtime_checkable
class AuthorizationPolicy(Protocol):
    """Pluggable source of every role, ownership and message decision.

    The pipeline never decides on its own what "authorized" means; it
    asks the injected policy. Subclass :class:`~graphql_authz.Authorization`
    for conventional defaults or implement the protocol directly.
    """

    def not_scoped_roles(self) -> Set[Role]: ...

    def default_rule(self) -> RuleId: ...

    def is_authorized(self, resolution: Resolution, permission: Permission) -> bool: ...

    def valid_roles(self) -> Set[Role]: ...

    def context_user_authorized(self, context: Any, scope_entity: Any, rule: RuleId) -> bool: ...

    def unauthorized_message(self, resolution: Resolution) -> ErrorPayload: ...

    def unauthorized_query_scope_message(
        self, resolution: Resolution, type_name: str
    ) -> ErrorPayload: ...
