"""graphql-core integration — field declarations and execution middleware."""

from graphql_authz.schema._extensions import (
    EXTENSION_KEY,
    FieldAuthorization,
    authorize_field,
    get_field_authorization,
)
from graphql_authz.schema._middleware import (
    AuthorizationMiddleware,
    raise_configuration_errors,
    to_graphql_error,
)

__all__ = [
    "EXTENSION_KEY",
    "AuthorizationMiddleware",
    "FieldAuthorization",
    "authorize_field",
    "get_field_authorization",
    "raise_configuration_errors",
    "to_graphql_error",
]
