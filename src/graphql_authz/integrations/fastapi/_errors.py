"""Exception handlers for FastAPI integration."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from graphql_authz.exceptions import ConfigurationError

__all__ = ["install_error_handlers"]

logger = logging.getLogger("graphql_authz")


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for graphql-authz errors on a FastAPI app.

    - ``ConfigurationError`` -> 500 Internal Server Error, logged at ERROR

    Denials never reach these handlers; they are ordinary GraphQL errors
    in the response body.

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: ConfigurationError
    ) -> JSONResponse:
        logger.error("Authorization misconfigured: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
