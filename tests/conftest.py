"""Shared test fixtures for graphql-authz tests."""

from __future__ import annotations

from typing import Any

import pytest

from graphql_authz.config._config import _reset_global_config
from graphql_authz.policy._registry import RuleRegistry
from graphql_authz.policy._registry_policy import RegistryAuthorization
from graphql_authz.testing._users import MockUser, StaticAuthorization
from tests.models import Post, User

# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class AppAuthorization(RegistryAuthorization):
    """Registry-backed policy with the roles used throughout the tests."""

    valid_roles_list = ("user", "manager", "admin")
    super_role = "admin"


def own_user(user: Any, entity: User) -> bool:
    return user is not None and entity.id == user.id


def own_post(user: Any, entity: Post) -> bool:
    return user is not None and entity.author_id == user.id


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config():
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def registry() -> RuleRegistry:
    """Fresh registry with the ownership rules for User and Post."""
    reg = RuleRegistry()
    reg.register(User, "default", own_user, name="own_user", description="")
    reg.register(Post, "default", own_post, name="own_post", description="")
    return reg


@pytest.fixture()
def policy(registry: RuleRegistry) -> AppAuthorization:
    return AppAuthorization(registry=registry)


@pytest.fixture()
def static_policy() -> StaticAuthorization:
    """Recording policy granting ownership when ``entity.id == user.id``."""
    return StaticAuthorization(
        roles=("user", "manager", "admin"),
        access=lambda user, entity, rule: user is not None
        and getattr(entity, "id", None) == user.id,
    )


@pytest.fixture()
def alice() -> MockUser:
    return MockUser(id=7, role="user")


@pytest.fixture()
def mallory() -> MockUser:
    return MockUser(id=9, role="user")


@pytest.fixture()
def admin() -> MockUser:
    return MockUser(id=1, role="admin")
