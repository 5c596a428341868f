"""RuleRegistry — stores and retrieves ownership rules per (scope, rule)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from graphql_authz._types import RuleId

__all__ = ["RuleRegistration", "RuleRegistry", "get_default_registry"]

RuleFn = Callable[[Any, Any], bool]


@dataclass(frozen=True, slots=True)
class RuleRegistration:
    """A single registered ownership rule with its metadata.

    Attributes:
        scope: The scope entity type this rule applies to.
        rule: The rule identifier (e.g. ``"default"``, ``"accept_user"``).
        fn: Callable taking ``(user, scope_entity)`` and returning a bool.
        name: The rule function name (for logging).
        description: Human-readable description (from docstring).
    """

    scope: type
    rule: RuleId
    fn: RuleFn
    name: str
    description: str


class RuleRegistry:
    """Registry that maps (scope type, rule) pairs to ownership rules.

    Thread-safe for reads after startup. Append-only during registration.

    Example::

        registry = RuleRegistry()
        registry.register(User, "default", lambda user, u: u.id == user.id,
                          name="own_user", description="")
        rules = registry.lookup(User, "default")
    """

    def __init__(self) -> None:
        self._rules: dict[tuple[type, RuleId], list[RuleRegistration]] = {}

    def register(
        self,
        scope: type,
        rule: RuleId,
        fn: RuleFn,
        *,
        name: str,
        description: str,
    ) -> None:
        """Register an ownership rule for a (scope, rule) pair.

        Multiple rules can be registered for the same key; access is
        granted when any of them grants it.
        """
        registration = RuleRegistration(
            scope=scope,
            rule=rule,
            fn=fn,
            name=name,
            description=description,
        )
        self._rules.setdefault((scope, rule), []).append(registration)

    def lookup(self, scope: type, rule: RuleId) -> list[RuleRegistration]:
        """Look up all rules for a (scope, rule) pair.

        Returns a copy of the internal list so callers cannot mutate
        the registry state. Rules registered for a base class apply to
        subclasses when the subclass has none of its own.
        """
        for klass in scope.__mro__:
            registrations = self._rules.get((klass, rule))
            if registrations:
                return list(registrations)
        return []

    def has_rule(self, scope: type, rule: RuleId) -> bool:
        """Check whether at least one rule exists for (scope, rule)."""
        return bool(self.lookup(scope, rule))

    def registered_scopes(self, rule: RuleId) -> set[type]:
        """Return all scope types that have rules registered for *rule*."""
        return {scope for scope, key in self._rules if key == rule}

    def clear(self) -> None:
        """Remove all registered rules. Primarily useful in test teardown."""
        self._rules.clear()


# Module-level default registry (singleton).
_default_registry = RuleRegistry()


def get_default_registry() -> RuleRegistry:
    """Return the global default (singleton) rule registry.

    This is the registry used by ``@scope_rule`` and
    ``RegistryAuthorization`` when no explicit registry is provided.
    """
    return _default_registry
