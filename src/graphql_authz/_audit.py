"""Audit logging for role and scope decisions."""

from __future__ import annotations

import logging
from typing import Any

from graphql_authz._types import Permission, RuleId, ScopeProbe

__all__ = ["log_missing_rule", "log_role_decision", "log_scope_decision"]

logger = logging.getLogger("graphql_authz")


def log_role_decision(*, query_name: str, permission: Permission, authorized: bool) -> None:
    """Log the outcome of the role check for one field.

    Example::

        log_role_decision(query_name="updateUser", permission="user", authorized=True)
    """
    logger.info(
        "Role check: %s permit=%r — %s",
        query_name,
        permission,
        "granted" if authorized else "denied",
    )


def log_scope_decision(
    *,
    query_name: str,
    scope: type,
    rule: RuleId,
    probe: ScopeProbe,
    authorized: bool,
) -> None:
    """Log the outcome of the scope check for one field.

    Logging levels:
    - INFO: Summary (field, scope, verdict)
    - DEBUG: Detailed (rule, probe fields)
    """
    logger.info(
        "Scope check: %s scope=%s — %s",
        query_name,
        scope.__name__,
        "granted" if authorized else "denied",
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Scope probe for %s: rule=%r fields=%s",
            query_name,
            rule,
            [name for name, _ in probe],
        )


def log_missing_rule(*, scope: type, rule: RuleId, user: Any) -> None:
    """Log that deny-by-default applied because no rule is registered."""
    logger.warning(
        "No ownership rule registered for (%s, %r) — deny-by-default applied for %r",
        scope.__name__,
        rule,
        user,
    )
