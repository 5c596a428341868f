"""graphql-authz testing utilities — MockUser, assertions, and fixtures.

Provides test helpers for verifying field authorization:

- **MockUser / factories**: Lightweight callers for tests.
- **make_resolution / StaticAuthorization**: Resolutions and a recording policy.
- **Assertion helpers**: ``assert_authorized``, ``assert_denied``.
- **Fixtures**: ``rule_registry``, ``authz_config``, ``isolated_authz_state``.

Example::

    from graphql_authz import QueryAuthorization
    from graphql_authz.testing import StaticAuthorization, assert_denied, make_resolution

    def test_guest_cannot_update_user():
        gate = QueryAuthorization(permit="user", scope=User, policy=StaticAuthorization())
        assert_denied(gate(make_resolution("updateUser", arguments={"id": 7})))
"""

from graphql_authz.testing._assertions import assert_authorized, assert_denied
from graphql_authz.testing._fixtures import (
    authz_config,
    isolated_authz_state,
    rule_registry,
)
from graphql_authz.testing._isolation import isolated_authz
from graphql_authz.testing._users import (
    MockUser,
    StaticAuthorization,
    make_admin,
    make_anonymous,
    make_resolution,
    make_user,
)

__all__ = [
    "MockUser",
    "StaticAuthorization",
    "assert_authorized",
    "assert_denied",
    "authz_config",
    "isolated_authz",
    "isolated_authz_state",
    "make_admin",
    "make_anonymous",
    "make_resolution",
    "make_user",
    "rule_registry",
]
