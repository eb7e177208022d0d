"""Jira client package for ticket search and creation."""

from .client import JiraTrackerClient
from .correlator import IssueCorrelator
from .creator import IssueCreator, IssueType
from .models import JiraSearchIssue, TicketDescriptor
from .queries import fix_version_to_jira_version, fix_version_to_jira_wildcard

__all__ = [
    "IssueCorrelator",
    "IssueCreator",
    "IssueType",
    "JiraSearchIssue",
    "JiraTrackerClient",
    "TicketDescriptor",
    "fix_version_to_jira_version",
    "fix_version_to_jira_wildcard",
]
