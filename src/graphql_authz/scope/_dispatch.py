"""Scope entity assembly and ownership dispatch to the policy."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Any

from sqlalchemy import inspect as sa_inspect

from graphql_authz._types import RuleId, ScopeProbe
from graphql_authz.exceptions import EmptyScopeProbe, UnknownScopeFieldError
from graphql_authz.policy._protocol import AuthorizationPolicy

__all__ = ["build_scope_entity", "has_user_access", "scope_fields", "validate_scope_fields"]


def scope_fields(scope: type) -> set[str] | None:
    """Return the attribute names *scope* can be built with, if knowable.

    SQLAlchemy mapped classes report their mapped attributes, dataclasses
    their init fields. Anything else returns ``None`` (not checked).
    """
    if dataclasses.is_dataclass(scope):
        return {f.name for f in dataclasses.fields(scope) if f.init}
    mapper = sa_inspect(scope, raiseerr=False)
    if mapper is not None and hasattr(mapper, "all_orm_descriptors"):
        return set(mapper.all_orm_descriptors.keys()) - {"__mapper__"}
    return None


def validate_scope_fields(scope: type, names: Iterable[str]) -> None:
    """Raise :class:`UnknownScopeFieldError` for names *scope* lacks."""
    known = scope_fields(scope)
    if known is None:
        return
    unknown = set(names) - known
    if unknown:
        raise UnknownScopeFieldError(scope=scope, fields=unknown)


def build_scope_entity(scope: type, probe: ScopeProbe) -> Any:
    """Build a partial *scope* instance holding only the probe's fields.

    Fields outside the probe keep the type's defaults. Dataclass fields
    without a default are set to ``None`` so a sparse probe still builds.
    The entity is never added to a session or persisted.

    Example::

        entity = build_scope_entity(User, [("id", 7)])
        assert entity.id == 7
    """
    values = dict(probe)
    if dataclasses.is_dataclass(scope):
        for f in dataclasses.fields(scope):
            if (
                f.init
                and f.name not in values
                and f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING
            ):
                values[f.name] = None
    return scope(**values)


def has_user_access(
    probe: ScopeProbe,
    scope: type,
    context: Any,
    rule: RuleId,
    optional: bool,
    *,
    policy: AuthorizationPolicy,
) -> bool:
    """Ask *policy* whether the caller may act on the probed entity.

    An empty probe on an optional scope grants access without consulting
    the policy: there is nothing to check against. A partially filled
    optional probe is still sent to the policy.

    Raises:
        EmptyScopeProbe: The probe is empty and the scope is required.
    """
    if not probe:
        if optional:
            return True
        raise EmptyScopeProbe(scope=scope)

    scope_entity = build_scope_entity(scope, probe)
    return bool(policy.context_user_authorized(context, scope_entity, rule))
