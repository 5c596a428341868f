"""Import fixtures from graphql_authz.testing for test discovery."""

from graphql_authz.testing._fixtures import authz_config, isolated_authz_state, rule_registry

__all__ = ["authz_config", "isolated_authz_state", "rule_registry"]
