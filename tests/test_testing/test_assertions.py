"""Tests for graphql_authz.testing._assertions."""

from __future__ import annotations

import pytest

from graphql_authz.testing._assertions import assert_authorized, assert_denied
from graphql_authz.testing._users import make_resolution


class TestAssertAuthorized:
    def test_passes_for_untouched_resolution(self) -> None:
        assert_authorized(make_resolution("updateUser"))

    def test_fails_for_denied_resolution(self) -> None:
        resolution = make_resolution("updateUser").put_result(("error", "unauthorized"))
        with pytest.raises(AssertionError, match="expected updateUser to be authorized"):
            assert_authorized(resolution)

    def test_fails_for_resolved_value(self) -> None:
        resolution = make_resolution("updateUser").put_result(("ok", None))
        with pytest.raises(AssertionError):
            assert_authorized(resolution)


class TestAssertDenied:
    def test_passes_for_denied_resolution(self) -> None:
        resolution = make_resolution("updateUser").put_result(("error", "unauthorized"))
        assert_denied(resolution)
        assert_denied(resolution, message="unauthorized")

    def test_fails_for_untouched_resolution(self) -> None:
        with pytest.raises(AssertionError, match="to be denied"):
            assert_denied(make_resolution("updateUser"))

    def test_fails_for_other_message(self) -> None:
        resolution = make_resolution("updateUser").put_result(("error", "unauthorized"))
        with pytest.raises(AssertionError, match="expected denial message"):
            assert_denied(resolution, message="Not authorized to access this User")

    def test_mapping_message(self) -> None:
        payload = {"message": "forbidden", "code": "FORBIDDEN"}
        resolution = make_resolution("updateUser").put_result(("error", payload))
        assert_denied(resolution, message=payload)
