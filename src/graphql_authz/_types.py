"""Shared protocols and type aliases for graphql-authz."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from enum import Enum
from typing import Any, Literal, Protocol, Union, runtime_checkable

__all__ = [
    "ArgumentFieldMapping",
    "ArgumentPath",
    "ArgumentPathSpec",
    "ErrorPayload",
    "OnMissingRule",
    "Permission",
    "ResolutionState",
    "Role",
    "RuleId",
    "ScopeProbe",
    "UserLike",
]

# Valid values for AuthzConfig.on_missing_rule.
OnMissingRule = Literal["deny", "raise"]

# Lifecycle of a single field resolution.
ResolutionState = Literal["unresolved", "resolved"]

# A role is a plain string or an Enum member.
Role = Union[str, Enum]

# One role, or a collection of roles, declared per field.
Permission = Union[Role, Sequence[Role], frozenset[Role], set[Role]]

# A top-level argument name, or a key/index path into nested arguments.
ArgumentPath = Union[str, Sequence[Union[str, int]]]

# Canonical form: scope entity field -> argument path.
ArgumentFieldMapping = Mapping[str, ArgumentPath]

# The three accepted shapes of the ``args`` option.
ArgumentPathSpec = Union[str, Sequence[str], ArgumentFieldMapping]

# (scope entity field, resolved value) pairs collected for one check.
ScopeProbe = list[tuple[str, Any]]

# What a policy hands back for a denied field.
ErrorPayload = Union[str, Mapping[str, Any]]

# Rule identifiers only need to be hashable.
RuleId = Hashable


@runtime_checkable
class UserLike(Protocol):
    """Structural type for the caller stored in the request context.

    Any object with ``id`` and ``role`` attributes satisfies this protocol.

    Example::

        @dataclass
        class User:
            id: int
            role: str

        assert isinstance(User(id=1, role="user"), UserLike)
    """

    @property
    def id(self) -> Any: ...

    @property
    def role(self) -> Any: ...
