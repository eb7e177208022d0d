"""Discovery of backport project boards."""

import logging
import re
from typing import Any

from ..exceptions import NoAccessibleProjects, QueryExecutionFailure
from .models import ProjectDescriptor, ProjectListing
from .pagination import GraphQLExecutor, resolve_path
from .queries import build_project_discovery_query

logger = logging.getLogger(__name__)

# Used to filter the project names to only get projects related to backports
BACKPORT_PROJECT_PATTERN = re.compile(r"Backports.+")


class ProjectCatalog:
    """Lists the backport project boards of an organization."""

    def __init__(self, client: GraphQLExecutor, organization: str):
        """Initialize the catalog.

        Args:
            client: GraphQL executor
            organization: Organization login
        """
        self.client = client
        self.organization = organization

    def discover(
        self, name_pattern: re.Pattern[str] | str = BACKPORT_PROJECT_PATTERN
    ) -> ProjectListing:
        """Discover projects whose title matches ``name_pattern``.

        Only the first 100 projects of the organization are examined.

        Args:
            name_pattern: Pattern the whole project title must match

        Returns:
            Matching projects sorted by descending number, and the number of
            projects that could not be read

        Raises:
            QueryExecutionFailure: If the query reported errors
            NoAccessibleProjects: If no project at all could be read
        """
        pattern = re.compile(name_pattern) if isinstance(name_pattern, str) else name_pattern

        response = self.client.execute(
            build_project_discovery_query(), {"organization": self.organization}
        )
        if response.has_errors:
            raise QueryExecutionFailure(
                f"GraphQL query failed: {response.error_message}",
                errors=response.error_messages,
            )

        nodes = resolve_path(response.data, ("organization", "projectsV2", "nodes"))
        if nodes is None or (nodes and all(node is None for node in nodes)):
            raise NoAccessibleProjects(self.organization)

        inaccessible = 0
        projects = []
        for node in nodes:
            if node is None:
                inaccessible += 1
                continue
            if not pattern.fullmatch(node.get("title") or ""):
                continue
            project = self._convert_project(node)
            logger.info(f"Found project: {project}")
            projects.append(project)

        if inaccessible:
            logger.warning(
                f"{inaccessible} projects had to be ignored because it seems you "
                f"miss the permissions to read them"
            )

        projects.sort(key=lambda project: -project.number)
        return ProjectListing(projects=projects, inaccessible_count=inaccessible)

    def list_backport_projects(
        self, name_pattern: re.Pattern[str] | str = BACKPORT_PROJECT_PATTERN
    ) -> list[ProjectDescriptor]:
        """List matching projects, highest project number first."""
        return self.discover(name_pattern).projects

    def _convert_project(self, node: dict[str, Any]) -> ProjectDescriptor:
        """Convert a project node to our model."""
        options = resolve_path(node, ("field", "options")) or []
        return ProjectDescriptor(
            number=node["number"],
            title=node["title"],
            versions=[option["name"] for option in options if option],
        )
