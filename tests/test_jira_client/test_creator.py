"""Tests for Jira ticket creation."""

import logging

import pytest

from github_to_jira.exceptions import QueryExecutionFailure, UnknownIssueType
from github_to_jira.jira_client.creator import (
    TESTING_DESCRIPTION_PREFIX,
    TESTING_SUMMARY_PREFIX,
    IssueCreator,
    IssueType,
)
from tests.helpers.fakes import PR_FIELD_ID, FakeJira

ISSUE_TYPE_IDS = {IssueType.BUG: 1, IssueType.UPGRADE: 17, IssueType.FEATURE: 2}
PR_URL = "https://github.com/quarkusio/quarkus/pull/49874"


def make_creator(jira: FakeJira, **kwargs) -> IssueCreator:
    return IssueCreator(
        jira,
        jira_server="https://issues.example",
        project_key="QUARKUS",
        pull_request_field_id=PR_FIELD_ID,
        issue_type_ids=ISSUE_TYPE_IDS,
        **kwargs,
    )


class TestIssueCreator:
    """Test IssueCreator class."""

    def test_unknown_issue_type_makes_no_call(self, fake_jira: FakeJira) -> None:
        creator = make_creator(fake_jira)

        with pytest.raises(UnknownIssueType, match="Unknown issue type: hotfix"):
            creator.create_ticket(PR_URL, "Title", "3.20.4.GA", "hotfix", "Body")

        assert fake_jira.call_count == 0

    @pytest.mark.parametrize(
        "issue_type,expected_id", [("bug", "1"), ("upgrade", "17"), ("feature", "2")]
    )
    def test_issue_type_ids(
        self, fake_jira: FakeJira, issue_type: str, expected_id: str
    ) -> None:
        make_creator(fake_jira).create_ticket(PR_URL, "T", "3.20.4.GA", issue_type, "")
        assert fake_jira.created[0]["issuetype"] == {"id": expected_id}

    def test_fields_in_testing_mode(self, fake_jira: FakeJira) -> None:
        """Test the full payload of a test ticket."""
        url = make_creator(fake_jira, assignee="jdoe").create_ticket(
            PR_URL, "Fix the thing", "3.20.4.GA", "bug", "Fixes #1234"
        )

        assert url == "https://issues.example/browse/QUARKUS-1000"
        assert fake_jira.created == [
            {
                "project": {"key": "QUARKUS"},
                "summary": "[TESTING, PLEASE IGNORE] Fix the thing",
                "issuetype": {"id": "1"},
                "description": TESTING_DESCRIPTION_PREFIX + "Fixes #1234",
                PR_FIELD_ID: [PR_URL],
                "fixVersions": [{"name": "3.20.4.GA"}],
                "components": [{"name": "team/eng"}],
                "assignee": {"name": "jdoe"},
            }
        ]

    def test_fields_outside_testing_mode(self, fake_jira: FakeJira) -> None:
        make_creator(fake_jira, testing_run=False, component="area/core").create_ticket(
            PR_URL, "Fix the thing", "3.20.4.GA", "feature", "Body"
        )

        fields = fake_jira.created[0]
        assert fields["summary"] == "Fix the thing"
        assert not fields["summary"].startswith(TESTING_SUMMARY_PREFIX)
        assert fields["description"] == "Body"
        assert fields["components"] == [{"name": "area/core"}]
        assert "assignee" not in fields

    def test_no_transition_by_default(self, fake_jira: FakeJira) -> None:
        make_creator(fake_jira).create_ticket(PR_URL, "T", "3.20.4.GA", "bug", "")
        assert fake_jira.transitions == []

    def test_transition_after_creation(self, fake_jira: FakeJira) -> None:
        make_creator(fake_jira, transition_to_state=31).create_ticket(
            PR_URL, "T", "3.20.4.GA", "upgrade", ""
        )
        assert fake_jira.transitions == [("QUARKUS-1000", 31)]

    def test_failed_transition_still_returns_url(
        self, fake_jira: FakeJira, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a failed transition is logged and the created ticket reported."""
        fake_jira.transition_error = QueryExecutionFailure("transition failed")

        with caplog.at_level(logging.ERROR):
            url = make_creator(fake_jira, transition_to_state=31).create_ticket(
                PR_URL, "T", "3.20.4.GA", "bug", ""
            )

        assert url == "https://issues.example/browse/QUARKUS-1000"
        assert len(fake_jira.created) == 1
        assert fake_jira.transitions == [("QUARKUS-1000", 31)]
        assert "https://issues.example/browse/QUARKUS-1000 was created" in caplog.text
        assert "transition failed" in caplog.text

    def test_resolve_accepts_enum(self, fake_jira: FakeJira) -> None:
        assert make_creator(fake_jira).resolve_issue_type(IssueType.UPGRADE) == 17
