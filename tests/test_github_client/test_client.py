"""Tests for the GitHub GraphQL client."""

import json
import os
from unittest.mock import patch

import httpx
import pytest

from github_to_jira.exceptions import QueryExecutionFailure
from github_to_jira.github_client.client import GITHUB_GRAPHQL_URL, GitHubGraphQLClient


def make_client(handler) -> GitHubGraphQLClient:
    """Create a client whose requests are answered by ``handler``."""
    return GitHubGraphQLClient(
        token="test_token",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


class TestGitHubGraphQLClient:
    """Test GitHubGraphQLClient class."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "env_token"})
    def test_init_with_env_token(self) -> None:
        """Test initialization with environment token."""
        client = GitHubGraphQLClient()
        assert client.token == "env_token"
        assert client.headers["Authorization"] == "Bearer env_token"

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_token(self) -> None:
        """Test initialization without token raises error."""
        with pytest.raises(ValueError, match="GitHub token is required"):
            GitHubGraphQLClient()

    def test_execute_posts_query_and_variables(self) -> None:
        """Test the request body and headers."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": {"viewer": {"login": "me"}}})

        client = make_client(handler)
        result = client.execute("query { viewer { login } }", {"a": 1})

        assert seen["url"] == GITHUB_GRAPHQL_URL
        assert seen["auth"] == "Bearer test_token"
        assert seen["body"] == {"query": "query { viewer { login } }", "variables": {"a": 1}}
        assert not result.has_errors
        assert result.data == {"viewer": {"login": "me"}}

    def test_execute_reports_graphql_errors(self) -> None:
        """Test GraphQL errors are returned, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "data": None,
                    "errors": [{"message": "first"}, {"message": "second"}],
                },
            )

        result = make_client(handler).execute("query { x }")

        assert result.has_errors
        assert result.data is None
        assert result.error_message == "first; second"

    def test_execute_http_error(self) -> None:
        """Test HTTP failures raise QueryExecutionFailure."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"message": "Bad credentials"})

        with pytest.raises(QueryExecutionFailure, match="401"):
            make_client(handler).execute("query { x }")

    def test_execute_timeout(self) -> None:
        """Test timeouts raise QueryExecutionFailure."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(QueryExecutionFailure, match="timed out"):
            make_client(handler).execute("query { x }")

    def test_execute_invalid_json(self) -> None:
        """Test a non JSON body raises QueryExecutionFailure."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>")

        with pytest.raises(QueryExecutionFailure, match="not valid JSON"):
            make_client(handler).execute("query { x }")

    def test_context_manager_closes_http_client(self) -> None:
        """Test the underlying http client is closed on exit."""
        http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        with GitHubGraphQLClient(token="t", http_client=http):
            pass
        assert http.is_closed
