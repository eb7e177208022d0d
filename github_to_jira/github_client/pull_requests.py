"""Extraction of the pull requests queued on a backport project."""

import logging
from typing import Any

from ..exceptions import PullRequestNotFound, QueryExecutionFailure
from .models import PullRequestDescriptor
from .pagination import GraphQLExecutor, fetch_all_nodes, resolve_path
from .queries import (
    build_pull_request_page_query,
    build_pull_request_query,
    status_field_value,
)

logger = logging.getLogger(__name__)


class PullRequestExtractor:
    """Reads the pull requests of a project board."""

    def __init__(
        self, client: GraphQLExecutor, organization: str, repository: str | None = None
    ):
        """Initialize the extractor.

        Args:
            client: GraphQL executor
            organization: Organization login
            repository: Repository used by ``get_pull_request``
        """
        self.client = client
        self.organization = organization
        self.repository = repository

    def list_pull_requests_for_fix_version(
        self, project_number: int, fix_version: str
    ) -> list[PullRequestDescriptor]:
        """List the pull requests of a project whose status is ``fix_version``.

        Items that are not pull requests (e.g. plain issues) are skipped, as
        are pull requests without a status. The status must equal
        ``fix_version`` exactly.

        Args:
            project_number: Project number within the organization
            fix_version: Status option name, e.g. "3.20.4"

        Returns:
            Matching pull requests in project order

        Raises:
            QueryExecutionFailure: If a page reported errors
        """
        nodes = fetch_all_nodes(
            self.client,
            build_pull_request_page_query,
            ("organization", "projectV2", "items"),
            {"organization": self.organization, "projectNumber": project_number},
        )

        inaccessible = 0
        seen_urls: set[str] = set()
        pull_requests = []
        for node in nodes:
            if node is None:
                inaccessible += 1
                continue

            content = node.get("content") or {}
            # the project also holds issues, only pull requests have a url here
            if not content.get("url"):
                continue
            if status_field_value(node) != fix_version:
                continue

            if content["url"] in seen_urls:
                logger.warning(f"Ignoring duplicate project item for {content['url']}")
                continue
            seen_urls.add(content["url"])

            pull_request = self._convert_pull_request(content)
            logger.info(f"Found pull request: {pull_request.url}")
            pull_requests.append(pull_request)

        if inaccessible:
            logger.warning(
                f"{inaccessible} project items had to be ignored because it seems "
                f"you miss the permissions to read them"
            )

        return pull_requests

    def get_pull_request(self, number: int) -> PullRequestDescriptor:
        """Fetch a single pull request of the configured repository.

        Raises:
            QueryExecutionFailure: If the query reported errors
            PullRequestNotFound: If the repository has no such pull request
        """
        if not self.repository:
            raise ValueError("A repository is required to look up a pull request")

        response = self.client.execute(
            build_pull_request_query(),
            {"owner": self.organization, "repository": self.repository, "number": number},
        )
        content = resolve_path(response.data, ("repository", "pullRequest"))
        not_found = all(error.get("type") == "NOT_FOUND" for error in response.errors)
        if response.has_errors and not (not_found and not content):
            raise QueryExecutionFailure(
                f"GraphQL query failed: {response.error_message}",
                errors=response.error_messages,
            )
        if not content:
            raise PullRequestNotFound(f"{self.organization}/{self.repository}", number)
        return self._convert_pull_request(content)

    def _convert_pull_request(self, content: dict[str, Any]) -> PullRequestDescriptor:
        """Convert pull request content to our model."""
        return PullRequestDescriptor(
            number=content["number"],
            url=content["url"],
            title=content["title"],
            description=content.get("bodyText") or "",
        )
