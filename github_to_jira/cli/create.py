"""CLI command creating the Jira ticket of a backported pull request."""

import typer
from rich.console import Console
from rich.markup import escape

from ..exceptions import BackportError, UnknownIssueType
from ..jira_client.creator import IssueType
from .backports import build_importer
from .options import (
    GITHUB_FIX_VERSION_OPTION,
    ISSUE_TYPE_ARGUMENT,
    JIRA_FIX_VERSION_ARGUMENT,
    PR_NUMBER_ARGUMENT,
    PROJECT_OPTION,
)

console = Console()


def create(
    pr_number: int = PR_NUMBER_ARGUMENT,
    jira_fix_version: str = JIRA_FIX_VERSION_ARGUMENT,
    issue_type: str = ISSUE_TYPE_ARGUMENT,
    project: int | None = PROJECT_OPTION,
    github_fix_version: str | None = GITHUB_FIX_VERSION_OPTION,
) -> None:
    """Create the Jira ticket of a pull request.

    The pull request is read from the configured repository, or from a
    backport project when --project and --github-fix-version are given.
    Existing tickets are reported in the latter case and no ticket is
    created for a pull request that already has one.

    Examples:
        github-to-jira import 49874 3.20.4.GA bug
        github-to-jira import 49874 3.20.4.GA upgrade --project 42 -g 3.20.4
    """
    if (project is None) != (github_fix_version is None):
        console.print(
            "❌ [red]Error: --project and --github-fix-version must be used "
            "together[/red]"
        )
        raise typer.Exit(1)

    if issue_type not in {member.value for member in IssueType}:
        console.print(f"❌ [red]{UnknownIssueType(issue_type)}[/red]")
        raise typer.Exit(1)

    importer = build_importer()
    try:
        if project is not None and github_fix_version is not None:
            importer.importing(project, github_fix_version)
            pull_request = importer.cache.get(pr_number)
            if pull_request.linked_tickets:
                keys = ", ".join(ticket.key for ticket in pull_request.linked_tickets)
                console.print(
                    f"⚠️  [yellow]PR #{pr_number} already has Jira tickets: {keys}[/yellow]"
                )
                return
        else:
            pull_request = importer.pull_request_metadata(pr_number)

        console.print(f"🔗 Creating {issue_type} ticket for {pull_request.url}")
        url = importer.perform_import(pr_number, jira_fix_version, issue_type)
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        importer.close()

    console.print(f"✅ Created {url}")
