"""FastAPI integration for graphql-authz."""

from __future__ import annotations

try:
    import fastapi as _fastapi_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _fastapi_check
except ImportError as exc:
    raise ImportError(
        "FastAPI integration requires fastapi. Install it with: pip install graphql-authz[fastapi]"
    ) from exc

from graphql_authz.integrations.fastapi._errors import install_error_handlers
from graphql_authz.integrations.fastapi._router import (
    GraphQLRequest,
    get_current_user,
    graphql_router,
)

__all__ = [
    "GraphQLRequest",
    "get_current_user",
    "graphql_router",
    "install_error_handlers",
]
