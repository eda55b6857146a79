"""Shared fixtures for integration tests."""

import os

import pytest

from tanuki.api.core import ClientConfig

# Skip all integration tests unless RUN_TANUKI_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_TANUKI_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_TANUKI_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration for the instance under test (gitlab.com by default)."""
    return ClientConfig(
        host=os.environ.get("TANUKI_HOST", "gitlab.com"),
        token=os.environ.get("TANUKI_TOKEN") or None,
    )


@pytest.fixture
def public_project() -> str:
    return os.environ.get("TANUKI_PUBLIC_PROJECT", "gitlab-org/gitlab-runner")
