"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

PROJECT_NUMBER_ARGUMENT = typer.Argument(..., help="Backport project number")

GITHUB_FIX_VERSION_ARGUMENT = typer.Argument(
    ..., help="Fix version as set in the project's Status field, e.g. 3.20.4"
)

PR_NUMBER_ARGUMENT = typer.Argument(..., help="Pull request number")

JIRA_FIX_VERSION_ARGUMENT = typer.Argument(
    ..., help="Jira fix version of the new ticket, e.g. 3.20.4.GA"
)

ISSUE_TYPE_ARGUMENT = typer.Argument(..., help="Issue type: bug, upgrade or feature")

PATTERN_OPTION = typer.Option(
    None,
    "--pattern",
    "-p",
    help="Regular expression project titles must match (default: Backports.+)",
)

PROJECT_OPTION = typer.Option(
    None,
    "--project",
    "-P",
    help="Look the pull request up on this backport project instead of the repository",
)

GITHUB_FIX_VERSION_OPTION = typer.Option(
    None,
    "--github-fix-version",
    "-g",
    help="Project fix version the pull request is queued for (with --project)",
)
