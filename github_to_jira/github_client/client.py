"""GitHub GraphQL API client using httpx."""

import logging
import os
from typing import Any

import httpx

from ..exceptions import QueryExecutionFailure
from .models import GraphQLResponse

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"


class GitHubGraphQLClient:
    """Executes GraphQL queries against the GitHub API."""

    def __init__(
        self,
        token: str | None = None,
        timeout: float = 30.0,
        url: str = GITHUB_GRAPHQL_URL,
        http_client: httpx.Client | None = None,
    ):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
            timeout: Request timeout in seconds
            url: GraphQL endpoint
            http_client: Preconfigured httpx client, mostly for tests
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.url = url
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": "github-to-jira/0.1.0",
            "Accept": "application/vnd.github+json",
        }
        self.http = http_client or httpx.Client(timeout=timeout)

    def execute(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> GraphQLResponse:
        """Execute a GraphQL query.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The parsed response. GraphQL level errors are reported through
            ``GraphQLResponse.errors``, not raised.

        Raises:
            QueryExecutionFailure: If the HTTP request itself failed
        """
        payload = {"query": query, "variables": variables or {}}
        try:
            response = self.http.post(self.url, json=payload, headers=self.headers)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as e:
            raise QueryExecutionFailure(f"GitHub GraphQL request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise QueryExecutionFailure(
                f"GitHub GraphQL request failed: {e.response.status_code} "
                f"{e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise QueryExecutionFailure(f"GitHub GraphQL request failed: {e}") from e
        except ValueError as e:
            raise QueryExecutionFailure(
                f"GitHub GraphQL response is not valid JSON: {e}"
            ) from e

        result = GraphQLResponse(
            data=body.get("data"), errors=body.get("errors") or []
        )
        logger.debug(f"GraphQL response: {result.data}")
        return result

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "GitHubGraphQLClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
