"""Exceptions raised while importing backport pull requests into Jira."""


class BackportError(Exception):
    """Base class for all errors raised by github-to-jira."""


class QueryExecutionFailure(BackportError):
    """A GraphQL or Jira call reported an error.

    Pagination is aborted as soon as this is raised; pages fetched before the
    failure are discarded.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class NoAccessibleProjects(BackportError):
    """Project discovery returned no usable project data.

    This is distinct from "no project matched the name pattern" and almost
    always means the token is missing the ``read:project`` scope or the user
    is not a member of the organization.
    """

    def __init__(self, organization: str):
        super().__init__(
            f"No projects of organization '{organization}' are readable. "
            f"Make sure the GitHub token has the 'read:project' scope and that "
            f"you are a member of the '{organization}' organization."
        )
        self.organization = organization


class UnknownIssueType(BackportError, ValueError):
    """Ticket creation was requested with an unrecognized issue type."""

    def __init__(self, issue_type: str):
        super().__init__(f"Unknown issue type: {issue_type}")
        self.issue_type = issue_type


class MissingCacheEntry(BackportError, KeyError):
    """Ticket creation was requested for a pull request that was never fetched."""

    def __init__(self, pr_number: int):
        super().__init__(f"No PR with number {pr_number} found in the cache")
        self.pr_number = pr_number

    def __str__(self) -> str:
        return str(self.args[0])


class PullRequestNotFound(BackportError, LookupError):
    """A single pull request lookup returned nothing."""

    def __init__(self, repository: str, pr_number: int):
        super().__init__(f"Pull request #{pr_number} not found in {repository}")
        self.repository = repository
        self.pr_number = pr_number
