"""Flask extension serving an authorized GraphQL schema."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from flask import Flask, current_app, jsonify, request
from graphql import GraphQLSchema, graphql_sync

from graphql_authz.config._config import AuthzConfig
from graphql_authz.exceptions import ConfigurationError
from graphql_authz.policy._protocol import AuthorizationPolicy
from graphql_authz.schema._middleware import AuthorizationMiddleware, raise_configuration_errors

__all__ = ["AuthzExtension"]

logger = logging.getLogger("graphql_authz")


class AuthzExtension:
    """Flask extension that executes GraphQL requests with field authorization.

    Registers a POST view at ``path`` and an error handler turning
    configuration errors into 500 responses. Supports the Flask
    app-factory pattern via ``init_app()``.

    Args:
        app: Optional Flask application. If provided, calls ``init_app()``
            immediately.
        schema: The graphql-core schema to serve.
        policy: The :class:`AuthorizationPolicy` for every field.
        user_provider: A callable ``() -> user`` returning the current
            caller. Called within request context.
        path: URL rule of the GraphQL endpoint.
        config: Optional authorization config. Defaults to the global config.

    Example::

        app = Flask(__name__)
        AuthzExtension(
            app,
            schema=schema,
            policy=AppAuthorization(),
            user_provider=lambda: g.user,
        )
    """

    def __init__(
        self,
        app: Flask | None = None,
        *,
        schema: GraphQLSchema,
        policy: AuthorizationPolicy,
        user_provider: Callable[[], Any],
        path: str = "/graphql",
        config: AuthzConfig | None = None,
    ) -> None:
        self._schema = schema
        self._user_provider = user_provider
        self._path = path
        self._middleware = AuthorizationMiddleware(policy, config=config)
        self._middleware.check_schema(schema)

        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Initialize the extension with a Flask application.

        Stores the extension on ``app.extensions["graphql_authz"]``,
        registers the GraphQL view and the configuration error handler.
        """
        app.extensions["graphql_authz"] = self
        app.add_url_rule(self._path, "graphql_authz", _graphql_view, methods=["POST"])

        @app.errorhandler(ConfigurationError)
        def handle_configuration_error(  # pyright: ignore[reportUnusedFunction]
            exc: ConfigurationError,
        ) -> Any:
            logger.error("Authorization misconfigured: %s", exc)
            return jsonify({"detail": str(exc)}), 500

    def execute(
        self,
        query: str,
        *,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
    ) -> dict[str, Any]:
        """Execute *query* as the current caller and return the formatted result.

        Must be called within a Flask request context.
        """
        result = graphql_sync(
            self._schema,
            query,
            variable_values=variables,
            operation_name=operation_name,
            context_value={"request": request, "current_user": self._user_provider()},
            middleware=[self._middleware],
        )
        raise_configuration_errors(result)
        return result.formatted


def _graphql_view() -> Any:
    extension: AuthzExtension = current_app.extensions["graphql_authz"]
    payload = request.get_json(force=True) or {}
    return jsonify(
        extension.execute(
            payload.get("query", ""),
            variables=payload.get("variables"),
            operation_name=payload.get("operationName"),
        )
    )
