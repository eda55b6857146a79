"""Precise unit tests for the CurrentUser endpoint."""

from datetime import datetime, timezone

import pytest

from tanuki.api.core.exceptions import AuthenticationError
from tanuki.api.endpoints import CurrentUser
from tanuki.api.models import User
from tanuki.api.runtime.rest.runner import query
from tanuki.api.testing import ExpectedUrl, SingleTestClient

USER = {
    "id": 1,
    "username": "root",
    "name": "Administrator",
    "state": "active",
    "created_at": "2024-01-31T12:00:00Z",
    "is_admin": True,
    "web_url": "https://tanuki.test/root",
}


def test_builder_needs_nothing():
    assert CurrentUser.builder().build() == CurrentUser()


def test_endpoint():
    client = SingleTestClient(ExpectedUrl(endpoint="user"), USER)

    user = query(CurrentUser.builder().build(), client)

    assert isinstance(user, User)
    assert user.username == "root"
    assert user.is_admin is True
    assert user.created_at == datetime(2024, 1, 31, 12, tzinfo=timezone.utc)


def test_unauthorized():
    client = SingleTestClient(
        ExpectedUrl(endpoint="user", status=401), {"message": "401 Unauthorized"}
    )
    with pytest.raises(AuthenticationError) as exc_info:
        CurrentUser().query(client)
    assert exc_info.value.status == 401


@pytest.mark.asyncio
async def test_endpoint_async():
    client = SingleTestClient(ExpectedUrl(endpoint="user"), USER)
    user = await CurrentUser().query_async(client)
    assert user.id == 1
