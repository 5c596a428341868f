"""FastAPI router serving an authorized GraphQL schema."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from graphql import GraphQLSchema, graphql_sync
from pydantic import BaseModel, ConfigDict, Field

from graphql_authz.config._config import AuthzConfig
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.schema._middleware import AuthorizationMiddleware, raise_configuration_errors

__all__ = ["GraphQLRequest", "get_current_user", "graphql_router"]


class GraphQLRequest(BaseModel):
    """Body of a GraphQL-over-HTTP POST request."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")


def get_current_user(request: Request) -> Any:
    """Sentinel dependency — override via ``app.dependency_overrides[get_current_user]``.

    Raises ``NotImplementedError`` if not overridden, ensuring users
    configure how the caller is resolved before serving requests.

    Example::

        from graphql_authz.integrations.fastapi import get_current_user

        app.dependency_overrides[get_current_user] = my_get_current_user
    """
    raise NotImplementedError(
        "Override get_current_user via app.dependency_overrides[get_current_user]. "
        "See graphql-authz docs for configuration guide."
    )


def graphql_router(
    schema: GraphQLSchema,
    policy: AuthorizationPolicy,
    *,
    path: str = "/graphql",
    config: AuthzConfig | None = None,
) -> APIRouter:
    """Build an ``APIRouter`` executing *schema* with field authorization.

    The schema is checked once here, so broken field declarations fail
    when the app is assembled. Each request runs with the context
    ``{"request": request, "current_user": <get_current_user>}``.

    Args:
        schema: The graphql-core schema to serve.
        policy: The :class:`AuthorizationPolicy` for every field.
        path: Route path of the POST endpoint.
        config: Optional config. Defaults to the global config.

    Example::

        app = FastAPI()
        app.include_router(graphql_router(schema, AppAuthorization()))
        app.dependency_overrides[get_current_user] = current_user_from_token
        install_error_handlers(app)
    """
    middleware = AuthorizationMiddleware(policy, config=config)
    middleware.check_schema(schema)
    router = APIRouter()

    @router.post(path)
    def execute_graphql(
        payload: GraphQLRequest,
        request: Request,
        current_user: Any = Depends(get_current_user),
    ) -> dict[str, Any]:
        result = graphql_sync(
            schema,
            payload.query,
            variable_values=payload.variables,
            operation_name=payload.operation_name,
            context_value={"request": request, "current_user": current_user},
            middleware=[middleware],
        )
        raise_configuration_errors(result)
        return result.formatted

    return router
