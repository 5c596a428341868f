"""graphql-core middleware running field authorization."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
)

from graphql_authz._query_authorization import QueryAuthorization
from graphql_authz._resolution import FieldDefinition, Resolution
from graphql_authz._types import ErrorPayload
from graphql_authz.config._config import AuthzConfig, get_global_config
from graphql_authz.exceptions import ConfigurationError, MissingFieldAuthorization
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.schema._extensions import FieldAuthorization, get_field_authorization

__all__ = ["AuthorizationMiddleware", "raise_configuration_errors", "to_graphql_error"]


def to_graphql_error(payload: ErrorPayload) -> GraphQLError:
    """Convert a policy error payload into a ``GraphQLError``.

    Mapping payloads use their ``message`` key as the message and every
    other key as error extensions.
    """
    if isinstance(payload, Mapping):
        extensions = {key: value for key, value in payload.items() if key != "message"}
        return GraphQLError(str(payload.get("message", "unauthorized")), extensions=extensions)
    return GraphQLError(str(payload))


def raise_configuration_errors(result: ExecutionResult) -> ExecutionResult:
    """Re-raise configuration errors graphql-core recorded as field errors.

    graphql-core turns every exception raised while resolving a field into
    an entry of ``result.errors``. A broken authorization setup must not
    reach the client as an ordinary field error, so call this on every
    execution result.

    Raises:
        ConfigurationError: The first one found in ``result.errors``.
    """
    for error in result.errors or ():
        if isinstance(error.original_error, ConfigurationError):
            raise error.original_error
    return result


def _root_types(schema: GraphQLSchema) -> tuple[GraphQLObjectType | None, ...]:
    return (schema.query_type, schema.mutation_type, schema.subscription_type)


class AuthorizationMiddleware:
    """Authorize every field declaring :func:`authorize_field` extensions.

    Pass an instance to ``graphql(..., middleware=[...])``. A denied field
    resolves to a ``GraphQLError`` carrying the policy's message and its
    resolver is never called. Configuration errors are raised; pass the
    execution result through :func:`raise_configuration_errors` to surface
    them, or call :meth:`check_schema` at startup to catch most of them
    before the first request.

    Args:
        policy: The :class:`AuthorizationPolicy` used for every field.
        config: Optional config. Defaults to the global config.

    Example::

        middleware = AuthorizationMiddleware(AppAuthorization())
        middleware.check_schema(schema)
        result = graphql_sync(
            schema,
            "mutation { updateUser(id: 7) { id } }",
            context_value={"current_user": user},
            middleware=[middleware],
        )
        raise_configuration_errors(result)
    """

    def __init__(self, policy: AuthorizationPolicy, *, config: AuthzConfig | None = None) -> None:
        self._policy = policy
        self._config = config
        self._gates: dict[tuple[str, str], QueryAuthorization] = {}

    @property
    def config(self) -> AuthzConfig:
        return self._config if self._config is not None else get_global_config()

    def _gate(
        self, type_name: str, field_name: str, authorization: FieldAuthorization
    ) -> QueryAuthorization:
        key = (type_name, field_name)
        # Unlocked: concurrent first calls may build the same gate twice.
        gate = self._gates.get(key)
        if gate is None:
            gate = QueryAuthorization(
                permit=authorization.permit,
                scope=authorization.scope,
                args=authorization.args,
                optional=authorization.optional,
                rule=authorization.rule,
                policy=self._policy,
                config=self._config,
            )
            self._gates[key] = gate
        return gate

    def check_schema(self, schema: GraphQLSchema) -> None:
        """Build every declared gate now so setup faults raise at startup.

        Validates permissions and scope field names of every authorized
        field and, with ``require_field_authorization``, that every root
        field declares authorization.

        Raises:
            ConfigurationError: On the first broken declaration.
        """
        roots = [root for root in _root_types(schema) if root is not None]
        for named_type in schema.type_map.values():
            if not isinstance(named_type, GraphQLObjectType) or named_type.name.startswith("__"):
                continue
            for field_name, field in named_type.fields.items():
                authorization = get_field_authorization(field)
                if authorization is not None:
                    self._gate(named_type.name, field_name, authorization)
                elif self.config.require_field_authorization and named_type in roots:
                    raise MissingFieldAuthorization(
                        type_name=named_type.name, field_name=field_name
                    )

    def resolve(
        self, next_: Callable[..., Any], root: Any, info: GraphQLResolveInfo, **kwargs: Any
    ) -> Any:
        field = info.parent_type.fields.get(info.field_name)
        authorization = get_field_authorization(field)
        if authorization is None:
            if self.config.require_field_authorization and info.parent_type in _root_types(
                info.schema
            ):
                raise MissingFieldAuthorization(
                    type_name=info.parent_type.name, field_name=info.field_name
                )
            return next_(root, info, **kwargs)

        resolution = Resolution(
            definition=FieldDefinition(
                name=info.field_name,
                type=info.return_type,
                parent_type=info.parent_type.name,
            ),
            arguments=kwargs,
            context=info.context,
        )
        self._gate(info.parent_type.name, info.field_name, authorization)(resolution)
        if resolution.errors:
            return to_graphql_error(resolution.errors[0])
        return next_(root, info, **kwargs)
