"""Human-readable names for declared field result types."""

from __future__ import annotations

from typing import Any

from graphql import GraphQLNamedType, get_named_type, is_wrapping_type

__all__ = ["result_type_name"]

_SDL_WRAPPERS = "[]! "


def result_type_name(type_: Any) -> str:
    """Return the underlying named type, unwrapping list and non-null.

    Accepts graphql-core output types, SDL strings and Python classes.

    Example::

        result_type_name(GraphQLNonNull(GraphQLList(user_type)))  # "User"
        result_type_name("[User!]!")  # "User"
    """
    if isinstance(type_, str):
        return type_.strip(_SDL_WRAPPERS)
    if is_wrapping_type(type_) or isinstance(type_, GraphQLNamedType):
        return get_named_type(type_).name
    if isinstance(type_, type):
        return type_.__name__
    return str(type_)
