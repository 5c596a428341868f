"""Resolution — the per-field execution context the pipeline acts on."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from graphql_authz._types import ErrorPayload, ResolutionState

__all__ = ["FieldDefinition", "Resolution"]


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Static metadata of the field being resolved.

    Attributes:
        name: The field name as declared in the schema (e.g. ``updateUser``).
        type: The declared result type. A graphql-core output type, an SDL
            type string such as ``"[User!]!"``, or a Python class.
        parent_type: Name of the object type declaring the field.
    """

    name: str
    type: Any = None
    parent_type: str | None = None


@dataclass(eq=False)
class Resolution:
    """Mutable context for one field invocation.

    The execution engine owns the resolution; the authorization pipeline
    only ever changes its result slot (``state``, ``value``, ``errors``)
    through :meth:`put_result`.

    Example::

        resolution = Resolution(
            definition=FieldDefinition("updateUser", "User!"),
            arguments={"id": 7},
            context={"current_user": user},
        )
        resolution.put_result(("error", "unauthorized"))
        assert resolution.resolved
    """

    definition: FieldDefinition
    arguments: dict[str, Any] = field(default_factory=dict)
    context: Any = None
    state: ResolutionState = "unresolved"
    value: Any = None
    errors: list[ErrorPayload] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.state == "resolved"

    @property
    def query_name(self) -> str:
        return self.definition.name

    def put_result(self, result: tuple[str, Any]) -> Resolution:
        """Resolve with ``("ok", value)`` or ``("error", payload)``.

        Returns the same resolution so calls can be chained.
        """
        tag, payload = result
        if tag == "ok":
            self.value = payload
        elif tag == "error":
            self.errors.append(payload)
        else:
            raise ValueError(f"result tag must be 'ok' or 'error', got {tag!r}")
        self.state = "resolved"
        return self
