"""Test configuration and fixtures."""

import pytest

from github_to_jira.github_client.models import PullRequestDescriptor
from tests.helpers.fakes import FakeJira


@pytest.fixture
def fake_jira() -> FakeJira:
    """Create a Jira collaborator that records every call."""
    return FakeJira()


@pytest.fixture
def sample_pull_request() -> PullRequestDescriptor:
    """Create a sample pull request."""
    return PullRequestDescriptor(
        number=49874,
        url="https://github.com/quarkusio/quarkus/pull/49874",
        title="Fix the thing",
        description="Fixes #1234",
    )
