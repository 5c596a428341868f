"""Layered configuration for graphql-authz."""

from __future__ import annotations

from dataclasses import dataclass

from graphql_authz._types import ArgumentPathSpec, OnMissingRule

__all__ = [
    "AuthzConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_MISSING_RULE: set[str] = {"deny", "raise"}


@dataclass(frozen=True, slots=True)
class AuthzConfig:
    """Layered configuration with merge semantics (global -> schema -> field).

    Attributes:
        default_args: Argument spec used when a field omits ``args``.
        default_optional: Whether scope arguments are optional when a
            field omits ``optional``.
        log_decisions: Emit INFO/DEBUG records for every role and scope
            decision on the ``graphql_authz`` logger.
        on_missing_rule: Behavior of ``RegistryAuthorization`` when no
            ownership rule is registered. ``"deny"`` refuses access,
            ``"raise"`` raises ``NoRuleError``.
        validate_scope_fields: Reject ``args`` mappings naming fields the
            scope type does not define (SQLAlchemy models, dataclasses).
        require_field_authorization: Make ``AuthorizationMiddleware`` raise
            for root query/mutation fields declaring no authorization.

    Example::

        config = AuthzConfig(on_missing_rule="raise")
        merged = config.merge(log_decisions=True)
    """

    default_args: ArgumentPathSpec = "id"
    default_optional: bool = False
    log_decisions: bool = False
    on_missing_rule: OnMissingRule = "deny"
    validate_scope_fields: bool = True
    require_field_authorization: bool = False

    def __post_init__(self) -> None:
        if self.on_missing_rule not in _VALID_MISSING_RULE:
            raise ValueError(
                f"on_missing_rule must be one of {_VALID_MISSING_RULE!r}, "
                f"got {self.on_missing_rule!r}"
            )
        if not isinstance(self.default_args, (str, list, tuple, dict)):
            raise ValueError(
                f"default_args must be a field name, a list of names or a mapping, "
                f"got {self.default_args!r}"
            )

    def merge(
        self,
        *,
        default_args: ArgumentPathSpec | None = None,
        default_optional: bool | None = None,
        log_decisions: bool | None = None,
        on_missing_rule: OnMissingRule | None = None,
        validate_scope_fields: bool | None = None,
        require_field_authorization: bool | None = None,
    ) -> AuthzConfig:
        """Return a new config with non-None overrides applied.

        Example::

            base = AuthzConfig()
            schema_cfg = base.merge(on_missing_rule="raise")
            field_cfg = schema_cfg.merge(default_optional=True)
        """
        return AuthzConfig(
            default_args=default_args if default_args is not None else self.default_args,
            default_optional=(
                default_optional if default_optional is not None else self.default_optional
            ),
            log_decisions=log_decisions if log_decisions is not None else self.log_decisions,
            on_missing_rule=(
                on_missing_rule if on_missing_rule is not None else self.on_missing_rule
            ),
            validate_scope_fields=(
                validate_scope_fields
                if validate_scope_fields is not None
                else self.validate_scope_fields
            ),
            require_field_authorization=(
                require_field_authorization
                if require_field_authorization is not None
                else self.require_field_authorization
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AuthzConfig()


def get_global_config() -> AuthzConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    default_args: ArgumentPathSpec | None = None,
    default_optional: bool | None = None,
    log_decisions: bool | None = None,
    on_missing_rule: OnMissingRule | None = None,
    validate_scope_fields: bool | None = None,
    require_field_authorization: bool | None = None,
) -> AuthzConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        default_args=default_args,
        default_optional=default_optional,
        log_decisions=log_decisions,
        on_missing_rule=on_missing_rule,
        validate_scope_fields=validate_scope_fields,
        require_field_authorization=require_field_authorization,
    )
    return _global_config


def _set_global_config(cfg: AuthzConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AuthzConfig()
