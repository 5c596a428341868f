"""Composable ownership predicates."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = ["Predicate", "always_allow", "always_deny", "owns", "predicate"]


class Predicate:
    """A composable ownership predicate.

    Wraps a callable ``(user, scope_entity) -> bool``. Supports ``&``
    (AND), ``|`` (OR) and ``~`` (NOT) composition.

    Example::

        is_owner = owns("owner_id")
        is_reviewer = Predicate(lambda user, doc: user.id in doc.reviewer_ids)

        @scope_rule(Document, "update", predicate=is_owner | is_reviewer)
        def document_update(user, doc): ...
    """

    def __init__(self, fn: Callable[[Any, Any], bool], *, name: str = "") -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", "<anonymous>")

    def __call__(self, user: Any, scope_entity: Any) -> bool:
        return bool(self._fn(user, scope_entity))

    def __and__(self, other: Predicate) -> Predicate:
        def _and(user: Any, scope_entity: Any) -> bool:
            return self(user, scope_entity) and other(user, scope_entity)

        return Predicate(_and, name=f"({self._name} & {other._name})")

    def __or__(self, other: Predicate) -> Predicate:
        def _or(user: Any, scope_entity: Any) -> bool:
            return self(user, scope_entity) or other(user, scope_entity)

        return Predicate(_or, name=f"({self._name} | {other._name})")

    def __invert__(self) -> Predicate:
        def _not(user: Any, scope_entity: Any) -> bool:
            return not self(user, scope_entity)

        return Predicate(_not, name=f"~{self._name}")

    @property
    def name(self) -> str:
        """The human-readable name of this predicate."""
        return self._name

    def __repr__(self) -> str:
        return f"Predicate({self._name!r})"


def predicate(fn: Callable[[Any, Any], bool]) -> Predicate:
    """Decorator/factory that creates a Predicate from a callable."""
    return Predicate(fn, name=getattr(fn, "__name__", "<lambda>"))


def owns(field: str, *, user_field: str = "id") -> Predicate:
    """Grant access when ``entity.<field> == user.<user_field>``.

    An anonymous caller (``None``) or an unset entity field never matches.

    Example::

        owns("id")        # the caller is the user being acted upon
        owns("author_id") # the caller wrote the post
    """

    def _owns(user: Any, scope_entity: Any) -> bool:
        if user is None:
            return False
        value = getattr(scope_entity, field, None)
        return value is not None and value == getattr(user, user_field, None)

    return Predicate(_owns, name=f"owns({field})")


# Built-in predicates


def _always_allow(user: Any, scope_entity: Any) -> bool:
    return True


def _always_deny(user: Any, scope_entity: Any) -> bool:
    return False


always_allow: Predicate = Predicate(_always_allow, name="always_allow")
always_deny: Predicate = Predicate(_always_deny, name="always_deny")
