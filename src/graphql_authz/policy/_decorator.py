"""@scope_rule decorator — register ownership rule functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from graphql_authz._types import RuleId
from graphql_authz.policy._registry import RuleRegistry, get_default_registry

if TYPE_CHECKING:
    from graphql_authz.policy._predicate import Predicate

__all__ = ["scope_rule"]

F = TypeVar("F", bound=Callable[..., Any])


def scope_rule(
    scope: type,
    rule: RuleId = "default",
    *,
    predicate: Predicate | None = None,
    registry: RuleRegistry | None = None,
) -> Callable[[F], F]:
    """Decorator that registers an ownership rule for (scope, rule).

    The decorated function receives ``(user, scope_entity)`` and returns
    whether the user may act on the entity. When ``predicate`` is given it
    is registered instead of the function body; the function still
    provides the name and docstring.

    Example::

        @scope_rule(User)
        def own_user(user, entity) -> bool:
            return entity.id == user.id

        @scope_rule(User, "accept_user", predicate=owns("inviter_id"))
        def accept_user(user, entity) -> bool: ...
    """

    def decorator(fn: F) -> F:
        target = registry if registry is not None else get_default_registry()
        rule_fn: Callable[[Any, Any], bool] = predicate if predicate is not None else fn
        target.register(
            scope,
            rule,
            rule_fn,
            name=fn.__name__,
            description=fn.__doc__ or "",
        )
        return fn

    return decorator
