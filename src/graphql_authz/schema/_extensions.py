"""Per-field authorization declarations stored in graphql-core extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from graphql import GraphQLField

from graphql_authz._types import ArgumentPathSpec, Permission, RuleId

__all__ = ["EXTENSION_KEY", "FieldAuthorization", "authorize_field", "get_field_authorization"]

EXTENSION_KEY = "authorization"


@dataclass(frozen=True)
class FieldAuthorization:
    """Authorization declared on one schema field.

    Attributes:
        permit: One role or a list of roles allowed to call the field.
        scope: Scope entity type, ``False`` to disable scoping, or ``None``.
        args: Argument spec mapping arguments to scope fields.
        optional: Whether scope arguments may be absent.
        rule: Ownership rule name.
    """

    permit: Permission
    scope: type | Literal[False] | None = None
    args: ArgumentPathSpec | None = None
    optional: bool | None = None
    rule: RuleId | None = None


def authorize_field(
    permit: Permission,
    *,
    scope: type | Literal[False] | None = None,
    args: ArgumentPathSpec | None = None,
    optional: bool | None = None,
    rule: RuleId | None = None,
) -> dict[str, Any]:
    """Build the ``extensions`` dict declaring a field's authorization.

    Example::

        GraphQLField(
            user_type,
            args={"id": GraphQLArgument(GraphQLNonNull(GraphQLInt))},
            resolve=update_user,
            extensions=authorize_field("user", scope=User),
        )
    """
    return {
        EXTENSION_KEY: FieldAuthorization(
            permit=permit, scope=scope, args=args, optional=optional, rule=rule
        )
    }


def get_field_authorization(field: GraphQLField | None) -> FieldAuthorization | None:
    """Return the authorization declared on *field*, if any."""
    if field is None or not field.extensions:
        return None
    authorization = field.extensions.get(EXTENSION_KEY)
    if authorization is not None and not isinstance(authorization, FieldAuthorization):
        raise TypeError(
            f"extensions[{EXTENSION_KEY!r}] must be a FieldAuthorization, got {authorization!r}"
        )
    return authorization
