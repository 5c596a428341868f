"""Exception hierarchy for graphql-authz.

Only setup faults are exceptions. A denied role or scope check is not
raised; it is recorded on the resolution as an error result.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "AuthzError",
    "ConfigurationError",
    "EmptyScopeProbe",
    "InvalidPermissionError",
    "MissingFieldAuthorization",
    "NoRuleError",
    "ScopeArgumentNotFound",
    "ScopeNotConfigured",
    "UnknownScopeFieldError",
]


class AuthzError(Exception):
    """Base exception for all graphql-authz errors."""


class ConfigurationError(AuthzError):
    """The authorization setup of a field is broken.

    Configuration errors must halt the request (or process wiring) loudly.
    They are never converted into an "unauthorized" result, since that
    would make a broken deployment look like a legitimate denial.
    """


class InvalidPermissionError(ConfigurationError):
    """A field declares a permission the policy does not know.

    Attributes:
        permission: The declared permission.
        valid_roles: The roles accepted by the policy.

    Example::

        QueryAuthorization(permit="owner", policy=policy)
        # InvalidPermissionError: Invalid permission passed to QueryAuthorization: 'owner'.
    """

    def __init__(self, *, permission: object, valid_roles: Iterable[object]) -> None:
        self.permission = permission
        self.valid_roles = set(valid_roles)
        super().__init__(
            f"Invalid permission passed to QueryAuthorization: {permission!r}. "
            f"Allowed permission: {', '.join(sorted(map(repr, self.valid_roles)))}."
        )


class ScopeNotConfigured(ConfigurationError):
    """Scoping is required for the field but no scope type was given.

    Attributes:
        query_name: The field being resolved.
    """

    def __init__(self, *, query_name: str) -> None:
        self.query_name = query_name
        super().__init__(
            f"Error in query {query_name}: no scope argument found in "
            f"middleware Scope Authorization"
        )


class ScopeArgumentNotFound(ConfigurationError):
    """A required scope argument was absent from the call arguments.

    Attributes:
        scope_field: The scope entity field that could not be populated.
        argument_path: The argument path that was searched.
        query_name: The field being resolved.
        arguments: The full argument tree that was searched.
    """

    def __init__(
        self,
        *,
        scope_field: str,
        argument_path: Any,
        query_name: str,
        arguments: Any,
    ) -> None:
        self.scope_field = scope_field
        self.argument_path = argument_path
        self.query_name = query_name
        self.arguments = arguments
        super().__init__(
            f"Error in query {query_name}: no argument {argument_path!r} "
            f"for scope field {scope_field!r} found in {arguments!r}"
        )


class EmptyScopeProbe(ConfigurationError):
    """Scoping is enabled but no argument is mapped to the scope entity.

    An entity built from nothing cannot identify what the caller acts
    on, so a required scope with an empty ``args`` spec is a setup fault.

    Attributes:
        scope: The scope type.
    """

    def __init__(self, *, scope: type) -> None:
        self.scope = scope
        super().__init__(
            f"Cannot scope {scope.__name__}: no scope arguments configured and optional is false"
        )


class UnknownScopeFieldError(ConfigurationError):
    """The ``args`` mapping names fields the scope type does not define.

    Attributes:
        scope: The scope type.
        fields: The unknown field names.
    """

    def __init__(self, *, scope: type, fields: Iterable[str]) -> None:
        self.scope = scope
        self.fields = sorted(fields)
        super().__init__(
            f"Scope {scope.__name__} has no field(s) {', '.join(self.fields)}"
        )


class MissingFieldAuthorization(ConfigurationError):
    """A root field has no authorization declared.

    Raised only when ``require_field_authorization`` is enabled.
    """

    def __init__(self, *, type_name: str, field_name: str) -> None:
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"No permission specified for {type_name}.{field_name}")


class NoRuleError(ConfigurationError):
    """No ownership rule registered for (scope, rule).

    Raised when configured with ``on_missing_rule="raise"`` instead of
    the default deny-by-default behavior.

    Attributes:
        scope: The scope type with no rule.
        rule: The rule identifier with no registration.
    """

    def __init__(self, *, scope: str, rule: object) -> None:
        self.scope = scope
        self.rule = rule
        super().__init__(f"No ownership rule registered for ({scope}, {rule!r})")
