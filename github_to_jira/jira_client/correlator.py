"""Correlation of pull requests with existing Jira tickets."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .models import JiraSearchIssue, TicketDescriptor
from .pagination import SEARCH_PAGE_SIZE, JiraSearcher, fetch_all_issues
from .queries import (
    DEFAULT_PULL_REQUEST_FIELD_NAME,
    build_ticket_search_clause,
    build_ticket_search_query,
)

if TYPE_CHECKING:
    from ..github_client.models import PullRequestDescriptor

logger = logging.getLogger(__name__)


class IssueCorrelator:
    """Links pull requests to the Jira tickets that already reference them."""

    def __init__(
        self,
        searcher: JiraSearcher,
        jira_server: str,
        project_key: str,
        pull_request_field_id: str,
        pull_request_field_name: str = DEFAULT_PULL_REQUEST_FIELD_NAME,
        page_size: int = SEARCH_PAGE_SIZE,
    ):
        """Initialize the correlator.

        Args:
            searcher: Jira search executor
            jira_server: Jira base URL, used to build browse URLs
            project_key: Jira project key
            pull_request_field_id: Id of the PR link custom field
            pull_request_field_name: Name of the PR link field as used in JQL
            page_size: Number of issues per search page
        """
        self.searcher = searcher
        self.jira_server = jira_server.rstrip("/")
        self.project_key = project_key
        self.pull_request_field_id = pull_request_field_id
        self.pull_request_field_name = pull_request_field_name
        self.page_size = page_size

    def find_existing_tickets(
        self, pr_urls: Iterable[str], fix_version_wildcard: str
    ) -> list[TicketDescriptor]:
        """Find the tickets of a minor stream that reference any of the PRs.

        Args:
            pr_urls: Pull request URLs
            fix_version_wildcard: Wildcard such as "3.20.*"

        Returns:
            Matching tickets, empty without searching if no URL is given
        """
        # dict keeps the first-seen order while dropping duplicates
        distinct_urls = list(dict.fromkeys(url for url in pr_urls if url))
        if not distinct_urls:
            return []

        query = build_ticket_search_query(
            self.project_key,
            fix_version_wildcard,
            build_ticket_search_clause(distinct_urls, self.pull_request_field_name),
        )
        logger.info(f"Jira query to find existing issues: {query}")

        issues = fetch_all_issues(
            self.searcher, query, self.page_size, [self.pull_request_field_id]
        )

        tickets = []
        for issue in issues:
            ticket = self._convert_issue(issue)
            if ticket is not None:
                tickets.append(ticket)
        return tickets

    def correlate(
        self, pull_requests: list["PullRequestDescriptor"], fix_version_wildcard: str
    ) -> list["PullRequestDescriptor"]:
        """Attach existing tickets to each pull request.

        Every ticket referencing a pull request is linked to it, not just the
        first one. Links already present are kept.

        Args:
            pull_requests: Pull requests to enrich in place
            fix_version_wildcard: Wildcard such as "3.20.*"

        Returns:
            The same pull requests
        """
        if not pull_requests:
            return pull_requests

        tickets = self.find_existing_tickets(
            (pr.url for pr in pull_requests), fix_version_wildcard
        )
        for pull_request in pull_requests:
            for ticket in tickets:
                if ticket.references(pull_request.url) and pull_request.link_ticket(ticket):
                    logger.info(
                        f"Linking existing jira {ticket.url} to PR {pull_request.url}"
                    )
        return pull_requests

    def _convert_issue(self, issue: JiraSearchIssue) -> TicketDescriptor | None:
        """Convert a search result to our model, None if it links no PR."""
        urls = issue.field_strings(self.pull_request_field_id)
        if not urls:
            logger.warning(
                f"Jira issue {issue.key} matched the search but has no pull request URL"
            )
            return None
        return TicketDescriptor(
            key=issue.key,
            url=f"{self.jira_server}/browse/{issue.key}",
            linked_pull_request_urls=frozenset(urls),
        )
