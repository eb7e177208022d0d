"""Creation of Jira tickets for backported pull requests."""

import logging
from enum import Enum
from typing import Any, Protocol

from ..exceptions import QueryExecutionFailure, UnknownIssueType

logger = logging.getLogger(__name__)

TESTING_SUMMARY_PREFIX = "[TESTING, PLEASE IGNORE] "
TESTING_DESCRIPTION_PREFIX = "IGNORE: I'm just testing a new JIRA import app\n\n "


class IssueType(str, Enum):
    """Kinds of tickets that can be created."""

    BUG = "bug"
    UPGRADE = "upgrade"
    FEATURE = "feature"


class JiraWriter(Protocol):
    """Anything that can create and transition Jira issues."""

    def create_issue(self, fields: dict[str, Any]) -> str: ...

    def transition_issue(self, key: str, transition_id: int) -> None: ...


class IssueCreator:
    """Creates one Jira ticket per backported pull request."""

    def __init__(
        self,
        writer: JiraWriter,
        jira_server: str,
        project_key: str,
        pull_request_field_id: str,
        issue_type_ids: dict[IssueType, int],
        assignee: str | None = None,
        component: str = "team/eng",
        transition_to_state: int = 0,
        testing_run: bool = True,
    ):
        """Initialize the creator.

        Args:
            writer: Jira write executor
            jira_server: Jira base URL, used to build browse URLs
            project_key: Jira project key
            pull_request_field_id: Id of the PR link custom field
            issue_type_ids: Jira issue type id of each issue type
            assignee: Assignee of created tickets
            component: Component set on created tickets
            transition_to_state: Transition applied after creation, 0 for none
            testing_run: Mark tickets so that nobody acts on them
        """
        self.writer = writer
        self.jira_server = jira_server.rstrip("/")
        self.project_key = project_key
        self.pull_request_field_id = pull_request_field_id
        self.issue_type_ids = dict(issue_type_ids)
        self.assignee = assignee
        self.component = component
        self.transition_to_state = transition_to_state
        self.testing_run = testing_run

    def resolve_issue_type(self, issue_type: str) -> int:
        """Return the Jira issue type id for a type tag.

        Raises:
            UnknownIssueType: If the tag is not bug, upgrade or feature
        """
        try:
            return self.issue_type_ids[IssueType(issue_type)]
        except (ValueError, KeyError):
            raise UnknownIssueType(str(issue_type)) from None

    def build_fields(
        self,
        pr_url: str,
        pr_title: str,
        fix_version: str,
        issue_type: str,
        description: str,
    ) -> dict[str, Any]:
        """Build the creation payload of a ticket."""
        issue_type_id = self.resolve_issue_type(issue_type)

        summary = pr_title
        if self.testing_run:
            summary = TESTING_SUMMARY_PREFIX + summary
            description = TESTING_DESCRIPTION_PREFIX + description

        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "summary": summary,
            "issuetype": {"id": str(issue_type_id)},
            "description": description,
            self.pull_request_field_id: [pr_url],
            "fixVersions": [{"name": fix_version}],
            "components": [{"name": self.component}],
        }
        if self.assignee:
            fields["assignee"] = {"name": self.assignee}
        return fields

    def create_ticket(
        self,
        pr_url: str,
        pr_title: str,
        fix_version: str,
        issue_type: str,
        description: str,
    ) -> str:
        """Create the ticket of a pull request.

        Args:
            pr_url: Pull request URL stored in the PR link field
            pr_title: Ticket summary
            fix_version: Jira fix version, exact form such as "3.20.4.GA"
            issue_type: One of bug, upgrade, feature
            description: Ticket description

        Returns:
            Browseable URL of the new ticket

        Raises:
            UnknownIssueType: Before any call to Jira if the type is unknown
            QueryExecutionFailure: If creating the ticket failed. A failed
                transition is only logged, the ticket exists at that point.
        """
        fields = self.build_fields(pr_url, pr_title, fix_version, issue_type, description)
        logger.info(f"Issue input: {fields}")

        key = self.writer.create_issue(fields)
        url = f"{self.jira_server}/browse/{key}"
        logger.info(f"Created issue: {url}")

        if self.transition_to_state != 0:
            try:
                self.writer.transition_issue(key, self.transition_to_state)
            except QueryExecutionFailure as e:
                logger.error(
                    f"Issue {url} was created but transition "
                    f"{self.transition_to_state} failed: {e}"
                )
        return url
