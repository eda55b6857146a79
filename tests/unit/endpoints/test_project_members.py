"""Precise unit tests for the project member endpoints."""

from datetime import date

import pytest

from tanuki.api.core.enums import AccessLevel, Method
from tanuki.api.core.exceptions import MissingFieldError
from tanuki.api.core.params import FORM_CONTENT_TYPE
from tanuki.api.endpoints import AddProjectMember, ProjectMember, ProjectMembers
from tanuki.api.models import Member
from tanuki.api.runtime.rest.pagination import Pagination, paged
from tanuki.api.runtime.rest.runner import query
from tanuki.api.testing import ExpectedUrl, PagedTestClient, SingleTestClient

MEMBER = {
    "id": 1,
    "username": "dev",
    "name": "Developer",
    "state": "active",
    "access_level": 30,
    "expires_at": "2030-01-01",
}


class TestProjectMembers:
    """Test ProjectMembers."""

    def test_project_is_needed(self):
        with pytest.raises(MissingFieldError, match="`project`"):
            ProjectMembers.builder().build()

    def test_endpoint(self):
        client = PagedTestClient(
            ExpectedUrl(endpoint="projects/simple%2Fproject/members", paginated=True), [MEMBER]
        )
        endpoint = ProjectMembers.builder().project("simple/project").build()

        (member,) = paged(endpoint, Pagination.all()).query(client)

        assert member.access_level is AccessLevel.DEVELOPER
        assert member.is_expiring

    def test_endpoint_all(self):
        client = PagedTestClient(
            ExpectedUrl(endpoint="projects/simple%2Fproject/members/all", paginated=True), []
        )
        endpoint = ProjectMembers.builder().project("simple/project").all_members(True).build()
        assert paged(endpoint).query(client) == []

    def test_endpoint_filters(self):
        expected = ExpectedUrl(
            endpoint="projects/1/members",
            query=(
                ("query", "dev"),
                ("user_ids[]", "1"),
                ("user_ids[]", "2"),
                ("skip_users[]", "3"),
            ),
            paginated=True,
        )
        client = PagedTestClient(expected, [MEMBER])
        endpoint = (
            ProjectMembers.builder()
            .project(1)
            .search("dev")
            .user_ids([1, "2"])
            .skip_users([3])
            .build()
        )
        assert len(paged(endpoint).query(client)) == 1


class TestProjectMember:
    """Test ProjectMember."""

    def test_user_is_needed(self):
        with pytest.raises(MissingFieldError, match="`user`"):
            ProjectMember.builder().project(1).build()

    @pytest.mark.parametrize(
        ("all_members", "path"),
        [(False, "projects/1/members/5"), (True, "projects/1/members/all/5")],
    )
    def test_endpoint(self, all_members, path):
        client = SingleTestClient(ExpectedUrl(endpoint=path), MEMBER)
        endpoint = ProjectMember.builder().project(1).user(5).all_members(all_members).build()
        assert isinstance(query(endpoint, client), Member)


class TestAddProjectMember:
    """Test AddProjectMember."""

    @pytest.mark.parametrize("missing", ["project", "user", "access_level"])
    def test_required_fields(self, missing):
        values = {"project": 1, "user": 1, "access_level": AccessLevel.DEVELOPER}
        del values[missing]
        with pytest.raises(MissingFieldError) as exc_info:
            AddProjectMember.builder().set(**values).build()
        assert exc_info.value.field == missing

    def test_endpoint(self):
        expected = ExpectedUrl(
            method=Method.POST,
            endpoint="projects/simple%2Fproject/members",
            content_type=FORM_CONTENT_TYPE,
            body=b"user_id=1&access_level=30",
        )
        client = SingleTestClient(expected, MEMBER)
        endpoint = (
            AddProjectMember.builder()
            .project("simple/project")
            .user(1)
            .access_level(AccessLevel.DEVELOPER)
            .build()
        )
        assert query(endpoint, client).username == "dev"

    def test_endpoint_optional_fields(self):
        expected = ExpectedUrl(
            method=Method.POST,
            endpoint="projects/1/members",
            content_type=FORM_CONTENT_TYPE,
            body=(
                b"user_id=1&access_level=40&expires_at=2030-01-01&invite_source=cli"
                b"&tasks_to_be_done%5B%5D=ci&tasks_to_be_done%5B%5D=code&tasks_project_id=2"
            ),
        )
        client = SingleTestClient(expected, MEMBER)
        endpoint = (
            AddProjectMember.builder()
            .project(1)
            .user(1)
            .access_level(40)
            .expires_at(date(2030, 1, 1))
            .invite_source("cli")
            .tasks_to_be_done(["ci", "code"])
            .tasks_project_id(2)
            .build()
        )
        query(endpoint, client)
        assert len(client.requests) == 1
