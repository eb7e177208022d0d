"""GitHub client package for GraphQL API interaction."""

from .client import GitHubGraphQLClient
from .models import (
    GraphQLResponse,
    ProjectDescriptor,
    ProjectListing,
    PullRequestDescriptor,
)
from .projects import BACKPORT_PROJECT_PATTERN, ProjectCatalog
from .pull_requests import PullRequestExtractor

__all__ = [
    "BACKPORT_PROJECT_PATTERN",
    "GitHubGraphQLClient",
    "GraphQLResponse",
    "ProjectCatalog",
    "ProjectDescriptor",
    "ProjectListing",
    "PullRequestDescriptor",
    "PullRequestExtractor",
]
