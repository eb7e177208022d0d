"""Tests for GraphQL query building."""

from github_to_jira.github_client.queries import (
    build_project_discovery_query,
    build_pull_request_page_query,
    build_pull_request_query,
    status_field_value,
)


class TestProjectDiscoveryQuery:
    """Test the project discovery query."""

    def test_requests_first_hundred_projects(self) -> None:
        """Test that only one page of 100 projects is requested."""
        query = build_project_discovery_query()
        assert "organization(login: $organization)" in query
        assert "projectsV2(first: 100)" in query
        assert "after:" not in query

    def test_requests_status_options(self) -> None:
        """Test that the Status field options are requested."""
        query = build_project_discovery_query()
        assert 'field(name: "Status")' in query
        assert "... on ProjectV2SingleSelectField" in query
        assert "options" in query
        assert "title" in query and "number" in query


class TestPullRequestPageQuery:
    """Test the paginated project items query."""

    def test_first_page_has_no_cursor(self) -> None:
        """Test the first page query omits the after argument."""
        query = build_pull_request_page_query()
        assert "items(first: 100)" in query
        assert "after:" not in query

    def test_next_page_embeds_cursor(self) -> None:
        """Test the cursor is embedded as a string literal."""
        query = build_pull_request_page_query("Y3Vyc29yOjEwMA==")
        assert 'items(first: 100, after: "Y3Vyc29yOjEwMA==")' in query

    def test_cursor_is_escaped(self) -> None:
        """Test quotes in a cursor cannot break out of the literal."""
        query = build_pull_request_page_query('abc"def')
        assert 'after: "abc\\"def"' in query

    def test_requests_page_info_and_pull_request_fields(self) -> None:
        """Test page info and pull request content are requested."""
        query = build_pull_request_page_query()
        assert "pageInfo" in query
        assert "endCursor" in query
        assert "hasNextPage" in query
        assert "... on PullRequest" in query
        for field in ("url", "title", "number", "bodyText"):
            assert field in query

    def test_status_is_aliased(self) -> None:
        """Test the status value is exposed under a stable alias."""
        query = build_pull_request_page_query()
        assert 'status: fieldValueByName(name: "Status")' in query
        assert "fixVersion: name" in query


class TestPullRequestQuery:
    """Test the single pull request query."""

    def test_query_shape(self) -> None:
        """Test the repository pull request lookup."""
        query = build_pull_request_query()
        assert "repository(owner: $owner, name: $repository)" in query
        assert "pullRequest(number: $number)" in query


class TestStatusFieldValue:
    """Test reading the status field of a project item."""

    def test_set_status(self) -> None:
        """Test reading a selected option."""
        assert status_field_value({"status": {"fixVersion": "3.20.4"}}) == "3.20.4"

    def test_missing_status(self) -> None:
        """Test items without status."""
        assert status_field_value({"status": None}) is None
        assert status_field_value({}) is None
        assert status_field_value({"status": {}}) is None
