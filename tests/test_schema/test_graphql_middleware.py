"""End-to-end tests for schema/_middleware.py through graphql-core execution."""

from __future__ import annotations

import pytest
from graphql import graphql_sync

from graphql_authz.config._config import AuthzConfig, configure
from graphql_authz.exceptions import (
    InvalidPermissionError,
    MissingFieldAuthorization,
    ScopeNotConfigured,
    UnknownScopeFieldError,
)
from graphql_authz.schema._middleware import (
    AuthorizationMiddleware,
    raise_configuration_errors,
    to_graphql_error,
)
from graphql_authz.testing._users import MockUser
from tests.conftest import AppAuthorization
from tests.models import User
from tests.test_schema.schema import schema, single_field_schema


def execute(source, user, middleware, variables=None, *, against=schema):
    return graphql_sync(
        against,
        source,
        context_value={"current_user": user},
        variable_values=variables,
        middleware=[middleware],
    )


@pytest.fixture()
def middleware(policy):
    return AuthorizationMiddleware(policy)


class TestOwnership:
    def test_owner_updates_self(self, middleware, alice):
        source = 'mutation { updateUser(id: 7, name: "Al") { id name } }'
        result = execute(source, alice, middleware)
        assert result.errors is None
        assert result.data == {"updateUser": {"id": 7, "name": "Al"}}

    def test_other_user_is_denied(self, middleware, mallory):
        result = execute('mutation { updateUser(id: 7, name: "Al") { id } }', mallory, middleware)
        assert result.data == {"updateUser": None}
        assert len(result.errors) == 1
        assert result.errors[0].message == "Not authorized to access this User"
        assert result.errors[0].path == ["updateUser"]

    def test_query_field_is_scoped(self, middleware, alice):
        result = execute("{ user(id: 9) { name } }", alice, middleware)
        assert result.data == {"user": None}
        assert result.errors[0].message == "Not authorized to access this User"

    def test_variables_feed_the_probe(self, middleware, alice):
        result = execute(
            "query($id: Int!) { user(id: $id) { name } }", alice, middleware, {"id": 7}
        )
        assert result.data == {"user": {"name": "Alice"}}

    def test_renamed_argument(self, middleware, alice, mallory):
        source = "mutation { deleteUser(userId: 7) { id } }"
        assert execute(source, alice, middleware).data == {"deleteUser": {"id": 7}}
        assert execute(source, mallory, middleware).data == {"deleteUser": None}

    def test_nested_argument_with_named_rule(self, registry, alice):
        source = "mutation { acceptUser(params: {id: 7}) { id } }"
        middleware = AuthorizationMiddleware(AppAuthorization(registry=registry))
        denied = execute(source, alice, middleware)
        assert denied.errors[0].message == "Not authorized to access this User"

        registry.register(
            User, "accept_user", lambda user, entity: entity.id == user.id,
            name="accept_user", description="",
        )
        assert execute(source, alice, middleware).data == {"acceptUser": {"id": 7}}

    def test_several_denied_fields(self, middleware, mallory):
        result = execute(
            "{ a: user(id: 7) { id } b: user(id: 9) { id } }", mallory, middleware
        )
        assert result.data == {"a": None, "b": {"id": 9}}
        assert [error.path for error in result.errors] == [["a"]]


class TestRoleGate:
    def test_wrong_role_gets_unauthorized(self, middleware, alice):
        result = execute("mutation { resetStats }", alice, middleware)
        assert result.data == {"resetStats": None}
        assert result.errors[0].message == "unauthorized"

    def test_role_with_scope_disabled(self, middleware):
        manager = MockUser(id=3, role="manager")
        assert execute("mutation { resetStats }", manager, middleware).data == {"resetStats": True}

    def test_anonymous_denied(self, middleware):
        result = execute("{ user(id: 7) { id } }", None, middleware)
        assert result.errors[0].message == "unauthorized"

    def test_all_role_is_open_and_unscoped(self, middleware):
        source = 'mutation { createUser(params: {id: 5, name: "Eve"}) { id } }'
        result = execute(source, None, middleware)
        assert result.errors is None
        assert result.data == {"createUser": {"id": 5}}

    def test_open_list_field(self, middleware):
        result = execute("{ users { id } }", None, middleware)
        assert result.data == {"users": [{"id": 7}, {"id": 9}]}

    def test_super_role_is_still_scoped_on_user_fields(self, middleware, admin):
        result = execute("{ user(id: 9) { id } }", admin, middleware)
        assert result.errors[0].message == "Not authorized to access this User"

    def test_undeclared_field_runs_unchecked(self, middleware):
        result = execute("{ me { id } }", MockUser(id=9), middleware)
        assert result.data == {"me": {"id": 9}}


class TestOptionalScope:
    def test_absent_argument_is_authorized(self, middleware, alice):
        assert execute("mutation { publishPost }", alice, middleware).data == {"publishPost": True}

    def test_present_argument_is_checked(self, middleware, alice):
        result = execute("mutation { publishPost(id: 1) }", alice, middleware)
        assert result.data == {"publishPost": None}
        assert result.errors[0].message == "Not authorized to access this Boolean"


class TestErrorPayloads:
    def test_mapping_payload_becomes_extensions(self, registry, mallory):
        class CodedAuthorization(AppAuthorization):
            def unauthorized_query_scope_message(self, resolution, type_name):
                return {"message": "forbidden", "code": "FORBIDDEN", "type": type_name}

        middleware = AuthorizationMiddleware(CodedAuthorization(registry=registry))
        result = execute("{ user(id: 7) { id } }", mallory, middleware)
        error = result.errors[0]
        assert error.message == "forbidden"
        assert error.extensions == {"code": "FORBIDDEN", "type": "User"}
        assert result.formatted["errors"][0]["extensions"]["code"] == "FORBIDDEN"

    def test_to_graphql_error_string(self):
        error = to_graphql_error("unauthorized")
        assert error.message == "unauthorized"
        assert not error.extensions

    def test_to_graphql_error_mapping_without_message(self):
        assert to_graphql_error({"code": "DENIED"}).message == "unauthorized"


class TestConfigurationErrors:
    def test_missing_scope_surfaces(self, policy, alice):
        broken = single_field_schema(permit="user")
        result = execute(
            "{ user(id: 7) { id } }", alice, AuthorizationMiddleware(policy), against=broken
        )
        assert result.data == {"user": None}
        with pytest.raises(ScopeNotConfigured, match="Error in query user"):
            raise_configuration_errors(result)

    def test_denials_are_not_configuration_errors(self, middleware, mallory):
        result = execute("{ user(id: 7) { id } }", mallory, middleware)
        assert raise_configuration_errors(result) is result

    def test_required_authorization_at_runtime(self, policy):
        middleware = AuthorizationMiddleware(
            policy, config=AuthzConfig(require_field_authorization=True)
        )
        result = execute("{ me { id } }", MockUser(id=7), middleware)
        with pytest.raises(MissingFieldAuthorization, match="Query.me"):
            raise_configuration_errors(result)

    def test_required_authorization_ignores_nested_fields(self, policy, alice):
        middleware = AuthorizationMiddleware(
            policy, config=AuthzConfig(require_field_authorization=True)
        )
        result = execute("{ user(id: 7) { id name } }", alice, middleware)
        assert result.errors is None


class TestCheckSchema:
    def test_valid_schema(self, middleware):
        middleware.check_schema(schema)
        assert ("Mutation", "updateUser") in middleware._gates
        assert ("Query", "me") not in middleware._gates

    def test_invalid_permission(self, middleware):
        with pytest.raises(InvalidPermissionError):
            middleware.check_schema(single_field_schema(permit="editor", scope=User))

    def test_unknown_scope_field(self, middleware):
        with pytest.raises(UnknownScopeFieldError, match="user_id"):
            middleware.check_schema(
                single_field_schema(permit="user", scope=User, args="user_id")
            )

    def test_required_authorization(self, policy):
        configure(require_field_authorization=True)
        with pytest.raises(MissingFieldAuthorization) as exc_info:
            AuthorizationMiddleware(policy).check_schema(schema)
        assert (exc_info.value.type_name, exc_info.value.field_name) == ("Query", "me")

    def test_gates_are_reused(self, middleware, alice):
        middleware.check_schema(schema)
        gate = middleware._gates[("Query", "user")]
        execute("{ user(id: 7) { id } }", alice, middleware)
        assert middleware._gates[("Query", "user")] is gate
