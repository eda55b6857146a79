"""Precise unit tests for the protected branch endpoints."""

import pytest

from tanuki.api.core.enums import Method, ProtectedAccessLevel
from tanuki.api.core.exceptions import MissingFieldError, NotFoundError
from tanuki.api.core.params import FORM_CONTENT_TYPE
from tanuki.api.endpoints import ProtectBranch, ProtectedAccess, UnprotectBranch
from tanuki.api.models import ProtectedBranch
from tanuki.api.runtime.rest.runner import ignore, query
from tanuki.api.testing import ExpectedUrl, SingleTestClient


class TestUnprotectBranch:
    """Test UnprotectBranch."""

    def test_project_is_needed(self):
        with pytest.raises(MissingFieldError) as exc_info:
            UnprotectBranch.builder().name("master").build()
        assert str(exc_info.value) == "`project` must be initialized"

    def test_name_is_needed(self):
        with pytest.raises(MissingFieldError) as exc_info:
            UnprotectBranch.builder().project(1).build()
        assert str(exc_info.value) == "`name` must be initialized"

    def test_project_and_name_are_sufficient(self):
        UnprotectBranch.builder().project(1).name("master").build()

    def test_endpoint(self):
        expected = ExpectedUrl(
            method=Method.DELETE,
            endpoint="projects/simple%2Fproject/protected_branches/branch%2Fname",
        )
        client = SingleTestClient(expected, b"")

        endpoint = UnprotectBranch.builder().project("simple/project").name("branch/name").build()
        ignore(endpoint).query(client)

        assert len(client.requests) == 1

    def test_not_found(self):
        expected = ExpectedUrl(
            method=Method.DELETE,
            endpoint="projects/simple%2Fproject/protected_branches/branch%2Fname",
            status=404,
        )
        client = SingleTestClient(expected, {"message": "404 Not Found"})

        endpoint = UnprotectBranch.builder().project("simple/project").name("branch/name").build()
        with pytest.raises(NotFoundError) as exc_info:
            ignore(endpoint).query(client)
        assert exc_info.value.status == 404
        assert exc_info.value.message == "404 Not Found"


class TestProtectedAccess:
    """Test ProtectedAccess rules."""

    def test_exactly_one_target(self):
        with pytest.raises(ValueError):
            ProtectedAccess()
        with pytest.raises(ValueError):
            ProtectedAccess(user_id=1, group_id=2)

    def test_level_from_int(self):
        assert ProtectedAccess.level(40).access_level is ProtectedAccessLevel.MAINTAINER


class TestProtectBranch:
    """Test ProtectBranch."""

    def test_required_fields(self):
        with pytest.raises(MissingFieldError, match="`project`"):
            ProtectBranch.builder().name("main").build()
        with pytest.raises(MissingFieldError, match="`name`"):
            ProtectBranch.builder().project(1).build()

    def test_endpoint_minimal(self):
        expected = ExpectedUrl(
            method=Method.POST,
            endpoint="projects/simple%2Fproject/protected_branches",
            content_type=FORM_CONTENT_TYPE,
            body=b"name=release%2F%2A",
        )
        client = SingleTestClient(expected, {"name": "release/*"})

        endpoint = ProtectBranch.builder().project("simple/project").name("release/*").build()
        result = query(endpoint, client)

        assert isinstance(result, ProtectedBranch)
        assert result.name == "release/*"
        assert result.push_access_levels == []

    def test_endpoint_full_body(self):
        body = (
            b"name=main"
            b"&push_access_level=40"
            b"&merge_access_level=30"
            b"&allow_force_push=false"
            b"&allowed_to_push%5B%5D%5Buser_id%5D=7"
            b"&allowed_to_push%5B%5D%5Bgroup_id%5D=9"
            b"&allowed_to_unprotect%5B%5D%5Baccess_level%5D=60"
        )
        expected = ExpectedUrl(
            method=Method.POST,
            endpoint="projects/1/protected_branches",
            content_type=FORM_CONTENT_TYPE,
            body=body,
        )
        client = SingleTestClient(
            expected,
            {
                "id": 3,
                "name": "main",
                "push_access_levels": [{"access_level": 40, "access_level_description": "Maintainers"}],
            },
        )

        endpoint = (
            ProtectBranch.builder()
            .project(1)
            .name("main")
            .push_access_level(ProtectedAccessLevel.MAINTAINER)
            .merge_access_level(30)
            .allow_force_push(False)
            .allowed_to_push([ProtectedAccess.user(7), ProtectedAccess.group(9)])
            .allowed_to_unprotect([ProtectedAccess.level(ProtectedAccessLevel.ADMIN)])
            .build()
        )
        result = query(endpoint, client)

        assert result.push_access_levels[0].access_level == 40


def test_unprotect_rejects_none_project():
    with pytest.raises(MissingFieldError) as exc_info:
        UnprotectBranch.builder().project(None).name("main").build()
    assert exc_info.value.field == "project"
