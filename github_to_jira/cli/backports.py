"""CLI commands for browsing backport projects and their pull requests."""

import re

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig
from ..exceptions import BackportError
from ..importer import BackportImporter
from ..jira_client.client import JiraTrackerClient
from .options import (
    GITHUB_FIX_VERSION_ARGUMENT,
    PATTERN_OPTION,
    PROJECT_NUMBER_ARGUMENT,
)

console = Console()


def build_importer() -> BackportImporter:
    """Build an importer from the environment, exiting on bad configuration."""
    try:
        return BackportImporter.from_config(AppConfig.from_env())
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"❌ [red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def projects(pattern: str | None = PATTERN_OPTION) -> None:
    """List the backport projects and the Jira fix versions.

    Examples:
        github-to-jira projects
        github-to-jira projects --pattern "Backports 3\\..+"
    """
    compiled = None
    if pattern:
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            console.print(
                f"❌ [red]Invalid pattern {escape(repr(pattern))}: {escape(str(e))}[/red]"
            )
            raise typer.Exit(1)

    importer = build_importer()
    if compiled is not None:
        importer.project_pattern = compiled

    try:
        listing, jira_fix_versions = importer.index()
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        importer.close()

    table = Table(title="Backport Projects")
    table.add_column("Number", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Fix Versions")
    for project in listing.projects:
        table.add_row(str(project.number), project.title, ", ".join(project.versions))
    console.print(table)

    if listing.inaccessible_count:
        console.print(
            f"⚠️  [yellow]{listing.inaccessible_count} projects were ignored "
            f"because you miss the permissions to read them[/yellow]"
        )

    console.print(
        f"Jira fix versions: {', '.join(jira_fix_versions) if jira_fix_versions else 'none'}"
    )


def pull_requests(
    project_number: int = PROJECT_NUMBER_ARGUMENT,
    github_fix_version: str = GITHUB_FIX_VERSION_ARGUMENT,
) -> None:
    """List the pull requests queued for a fix version and their Jira tickets.

    Examples:
        github-to-jira pull-requests 42 3.20.4
    """
    importer = build_importer()
    try:
        found = importer.importing(project_number, github_fix_version)
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        importer.close()

    if not found:
        console.print(
            f"❌ No pull requests found for {github_fix_version} "
            f"in project {project_number}"
        )
        return

    table = Table(title=f"Pull Requests for {github_fix_version}")
    table.add_column("Number", style="cyan", justify="right")
    table.add_column("Title", style="green")
    table.add_column("URL")
    table.add_column("Existing Jiras", style="magenta")
    for pull_request in found:
        table.add_row(
            str(pull_request.number),
            pull_request.title,
            pull_request.url,
            ", ".join(ticket.key for ticket in pull_request.linked_tickets) or "-",
        )
    console.print(table)

    missing = sum(1 for pull_request in found if not pull_request.linked_tickets)
    console.print(f"✅ Found {len(found)} pull requests, {missing} without a Jira")


def fix_versions() -> None:
    """List the GA fix versions of the Jira project, newest first."""
    try:
        config = AppConfig.from_env()
        config.validate_jira()
    except ValueError as e:
        console.print(f"❌ [red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        jira = JiraTrackerClient(
            server=config.jira_server,
            token=config.jira_token,
            project=config.jira_project,
            timeout=config.timeout,
        )
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    try:
        versions = jira.find_existing_fix_versions()
    except BackportError as e:
        console.print(f"❌ [red]{escape(str(e))}[/red]")
        raise typer.Exit(1)
    finally:
        jira.close()

    if not versions:
        console.print(f"❌ No GA fix versions found in {config.jira_project}")
        return
    for name in versions:
        console.print(name)
