"""Jira API client using the jira library."""

import logging
import os
import re
from typing import Any

from jira import JIRA
from jira.exceptions import JIRAError
from requests.exceptions import RequestException

from ..exceptions import QueryExecutionFailure
from .models import JiraSearchIssue

logger = logging.getLogger(__name__)

# Jira versions created for community releases, e.g. 3.20.4.GA
FIX_VERSION_PATTERN = re.compile(r"(\d+\.\d+)\.\d+\.GA")


class JiraTrackerClient:
    """Jira client exposing search, create and transition calls.

    Every call is bounded by ``timeout`` and is not retried; failures are
    raised as ``QueryExecutionFailure``.
    """

    def __init__(
        self,
        server: str,
        token: str | None = None,
        project: str = "QUARKUS",
        timeout: float = 30.0,
        jira: JIRA | None = None,
    ):
        """Initialize Jira client with bearer token authentication.

        Args:
            server: Jira base URL
            token: Jira personal access token. If None, reads from JIRA_TOKEN
                env var.
            project: Jira project key
            timeout: Timeout of every request in seconds
            jira: Preconfigured JIRA instance, mostly for tests

        Raises:
            QueryExecutionFailure: If the Jira server cannot be reached
        """
        self.server = server.rstrip("/")
        self.project = project
        self.timeout = timeout

        if jira is not None:
            self.jira = jira
            return

        token = token or os.getenv("JIRA_TOKEN")
        if not token:
            raise ValueError("Jira token is required. Set JIRA_TOKEN environment variable.")
        try:
            self.jira = JIRA(
                server=self.server,
                token_auth=token,
                timeout=timeout,
                max_retries=0,
            )
        except (JIRAError, RequestException) as e:
            raise QueryExecutionFailure(
                f"Could not connect to Jira at {self.server}: {e}"
            ) from e

    def browse_url(self, key: str) -> str:
        return f"{self.server}/browse/{key}"

    def search_page(
        self,
        jql: str,
        page_size: int,
        offset: int,
        fields: list[str] | None = None,
    ) -> list[JiraSearchIssue]:
        """Fetch one page of a JQL search.

        Args:
            jql: JQL query
            page_size: Maximum number of issues to return
            offset: Index of the first issue to return
            fields: Field ids to include, all navigable fields if None

        Returns:
            Issues of the page, possibly fewer than ``page_size``
        """
        try:
            result = self.jira.search_issues(
                jql,
                startAt=offset,
                maxResults=page_size,
                fields=",".join(fields) if fields else None,
                json_result=True,
            )
        except (JIRAError, RequestException) as e:
            raise QueryExecutionFailure(f"Jira search failed at offset {offset}: {e}") from e

        return [
            JiraSearchIssue(key=issue["key"], fields=issue.get("fields") or {})
            for issue in result.get("issues", [])
        ]

    def create_issue(self, fields: dict[str, Any]) -> str:
        """Create an issue and return its key."""
        try:
            issue = self.jira.create_issue(fields=fields, prefetch=False)
        except (JIRAError, RequestException) as e:
            raise QueryExecutionFailure(f"Jira issue creation failed: {e}") from e
        return issue.key

    def transition_issue(self, key: str, transition_id: int) -> None:
        """Move an issue through a workflow transition."""
        try:
            self.jira.transition_issue(key, str(transition_id))
        except (JIRAError, RequestException) as e:
            raise QueryExecutionFailure(
                f"Jira transition {transition_id} of {key} failed: {e}"
            ) from e

    def find_existing_fix_versions(self) -> list[str]:
        """List the project's GA fix versions, newest first."""
        try:
            versions = self.jira.project_versions(self.project)
        except (JIRAError, RequestException) as e:
            raise QueryExecutionFailure(
                f"Could not read versions of Jira project {self.project}: {e}"
            ) from e

        names = [
            version.name
            for version in versions
            if FIX_VERSION_PATTERN.fullmatch(version.name)
        ]
        return sorted(names, reverse=True)

    def close(self) -> None:
        try:
            self.jira.close()
        except Exception as e:
            logger.debug(f"Ignoring error while closing Jira client: {e}")

    def __enter__(self) -> "JiraTrackerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
