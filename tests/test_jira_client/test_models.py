"""Tests for Jira data models."""

import pytest
from pydantic import ValidationError

from github_to_jira.jira_client.models import JiraSearchIssue, TicketDescriptor


def test_field_strings_variants() -> None:
    issue = JiraSearchIssue(
        key="Q-1", fields={"list": ["a", None, "b"], "single": "c", "none": None}
    )
    assert issue.field_strings("list") == ["a", "b"]
    assert issue.field_strings("single") == ["c"]
    assert issue.field_strings("none") == []
    assert issue.field_strings("missing") == []


def test_ticket_requires_a_pull_request() -> None:
    with pytest.raises(ValidationError):
        TicketDescriptor(key="Q-1", url="u", linked_pull_request_urls=frozenset())


def test_ticket_references() -> None:
    ticket = TicketDescriptor(key="Q-1", url="u", linked_pull_request_urls={"a", "b"})
    assert ticket.references("a")
    assert not ticket.references("c")
