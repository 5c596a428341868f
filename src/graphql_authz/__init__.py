"""graphql-authz — role and ownership authorization for GraphQL fields.

Every field is checked in two stages. The role gate asks whether the
caller's role may call the field at all; the scope stage asks whether the
caller may act on the specific entity the field's arguments point at.

Example::

    from graphql_authz import AuthorizationMiddleware, RegistryAuthorization, scope_rule
    from graphql_authz.schema import authorize_field

    class AppAuthorization(RegistryAuthorization):
        valid_roles_list = ("user", "admin")
        super_role = "admin"

    @scope_rule(User)
    def own_user(user, entity) -> bool:
        return entity.id == user.id

    update_user = GraphQLField(
        user_type,
        args={"id": GraphQLArgument(GraphQLNonNull(GraphQLInt))},
        extensions=authorize_field("user", scope=User),
    )

    result = graphql_sync(schema, source, middleware=[AuthorizationMiddleware(AppAuthorization())])
"""

from importlib.metadata import PackageNotFoundError, version

from graphql_authz._query_authorization import QueryAuthorization
from graphql_authz._resolution import FieldDefinition, Resolution
from graphql_authz._types import UserLike
from graphql_authz.config._config import AuthzConfig, configure
from graphql_authz.exceptions import (
    AuthzError,
    ConfigurationError,
    EmptyScopeProbe,
    InvalidPermissionError,
    MissingFieldAuthorization,
    NoRuleError,
    ScopeArgumentNotFound,
    ScopeNotConfigured,
    UnknownScopeFieldError,
)
from graphql_authz.policy._base import Authorization
from graphql_authz.policy._decorator import scope_rule
from graphql_authz.policy._predicate import owns
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.policy._registry import RuleRegistry
from graphql_authz.policy._registry_policy import RegistryAuthorization
from graphql_authz.schema._extensions import FieldAuthorization, authorize_field
from graphql_authz.schema._middleware import AuthorizationMiddleware
from graphql_authz.scope._middleware import QueryScopeAuthorization

try:
    __version__ = version("graphql-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "__version__",
    "Authorization",
    "AuthorizationMiddleware",
    "AuthorizationPolicy",
    "AuthzConfig",
    "AuthzError",
    "ConfigurationError",
    "EmptyScopeProbe",
    "FieldAuthorization",
    "FieldDefinition",
    "InvalidPermissionError",
    "MissingFieldAuthorization",
    "NoRuleError",
    "QueryAuthorization",
    "QueryScopeAuthorization",
    "RegistryAuthorization",
    "Resolution",
    "RuleRegistry",
    "ScopeArgumentNotFound",
    "ScopeNotConfigured",
    "UnknownScopeFieldError",
    "UserLike",
    "authorize_field",
    "configure",
    "owns",
    "scope_rule",
]
