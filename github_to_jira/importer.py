"""High level import workflow: list backports, find tickets, create tickets."""

import logging
import re

from .cache import PullRequestCache
from .config import AppConfig
from .github_client.client import GitHubGraphQLClient
from .github_client.models import ProjectListing, PullRequestDescriptor
from .github_client.projects import BACKPORT_PROJECT_PATTERN, ProjectCatalog
from .github_client.pull_requests import PullRequestExtractor
from .jira_client.client import JiraTrackerClient
from .jira_client.correlator import IssueCorrelator
from .jira_client.creator import IssueCreator, IssueType
from .jira_client.queries import fix_version_to_jira_wildcard

logger = logging.getLogger(__name__)


class BackportImporter:
    """Ties the GitHub and Jira sides together.

    ``importing`` caches every pull request it lists so that
    ``perform_import`` can later create a ticket from its PR number alone.
    """

    def __init__(
        self,
        catalog: ProjectCatalog,
        extractor: PullRequestExtractor,
        correlator: IssueCorrelator,
        creator: IssueCreator,
        jira: JiraTrackerClient,
        cache: PullRequestCache | None = None,
        project_pattern: re.Pattern[str] = BACKPORT_PROJECT_PATTERN,
        github: GitHubGraphQLClient | None = None,
    ):
        self.catalog = catalog
        self.extractor = extractor
        self.correlator = correlator
        self.creator = creator
        self.jira = jira
        self.cache = cache if cache is not None else PullRequestCache()
        self.project_pattern = project_pattern
        self.github = github

    @classmethod
    def from_config(
        cls, config: AppConfig, cache: PullRequestCache | None = None
    ) -> "BackportImporter":
        """Build an importer talking to the configured GitHub and Jira servers.

        Raises:
            ValueError: If a token is missing
            QueryExecutionFailure: If the Jira server cannot be reached
        """
        config.validate_github()
        config.validate_jira()

        jira = JiraTrackerClient(
            server=config.jira_server,
            token=config.jira_token,
            project=config.jira_project,
            timeout=config.timeout,
        )
        github = GitHubGraphQLClient(token=config.github_token, timeout=config.timeout)
        return cls(
            catalog=ProjectCatalog(github, config.organization),
            extractor=PullRequestExtractor(
                github, config.organization, config.repository
            ),
            correlator=IssueCorrelator(
                jira,
                jira_server=config.jira_server,
                project_key=config.jira_project,
                pull_request_field_id=config.pull_request_field_id,
                pull_request_field_name=config.pull_request_field_name,
            ),
            creator=IssueCreator(
                jira,
                jira_server=config.jira_server,
                project_key=config.jira_project,
                pull_request_field_id=config.pull_request_field_id,
                issue_type_ids={
                    IssueType.BUG: config.issue_type_bug,
                    IssueType.UPGRADE: config.issue_type_component_upgrade,
                    IssueType.FEATURE: config.issue_type_feature,
                },
                assignee=config.assignee,
                component=config.component,
                transition_to_state=config.transition_to_state,
                testing_run=config.testing_run,
            ),
            jira=jira,
            cache=cache,
            github=github,
        )

    def index(self) -> tuple[ProjectListing, list[str]]:
        """Return the backport projects and the existing Jira fix versions."""
        listing = self.catalog.discover(self.project_pattern)
        return listing, self.jira.find_existing_fix_versions()

    def importing(
        self, project_number: int, github_fix_version: str
    ) -> list[PullRequestDescriptor]:
        """List the pull requests of a fix version with their existing tickets.

        Args:
            project_number: Backport project number
            github_fix_version: Status option of the project, e.g. "3.20.4"

        Returns:
            Pull requests, each linked to the tickets already referencing it
        """
        pull_requests = self.extractor.list_pull_requests_for_fix_version(
            project_number, github_fix_version
        )
        if pull_requests:
            self.correlator.correlate(
                pull_requests, fix_version_to_jira_wildcard(github_fix_version)
            )
        self.cache.put_all(pull_requests)
        return pull_requests

    def pull_request_metadata(self, pr_number: int) -> PullRequestDescriptor:
        """Fetch a single pull request and remember it for ``perform_import``."""
        pull_request = self.extractor.get_pull_request(pr_number)
        self.cache.put(pull_request)
        return pull_request

    def perform_import(
        self, pr_number: int, jira_fix_version: str, issue_type: str
    ) -> str:
        """Create the Jira ticket of a previously listed pull request.

        Args:
            pr_number: Pull request number
            jira_fix_version: Jira fix version, e.g. "3.20.4.GA"
            issue_type: One of bug, upgrade, feature

        Returns:
            Browseable URL of the new ticket

        Raises:
            MissingCacheEntry: If the pull request was not listed before
            UnknownIssueType: If the issue type is not recognized
        """
        pull_request = self.cache.get(pr_number)
        return self.creator.create_ticket(
            pull_request.url,
            pull_request.title,
            jira_fix_version,
            issue_type,
            pull_request.description,
        )

    def close(self) -> None:
        self.jira.close()
        if self.github is not None:
            self.github.close()
