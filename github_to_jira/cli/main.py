"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console

from .backports import fix_versions, projects, pull_requests
from .create import create

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="github-to-jira",
    help="Import GitHub backport pull requests into Jira",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log GraphQL and Jira activity"
    ),
) -> None:
    """Import GitHub backport pull requests into Jira."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


app.command(name="projects", context_settings={"help_option_names": ["-h", "--help"]})(
    projects
)
app.command(
    name="fix-versions", context_settings={"help_option_names": ["-h", "--help"]}
)(fix_versions)
app.command(
    name="pull-requests", context_settings={"help_option_names": ["-h", "--help"]}
)(pull_requests)
app.command(name="import", context_settings={"help_option_names": ["-h", "--help"]})(
    create
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from github_to_jira import __version__

    console.print(f"GitHub to Jira v{__version__}")


if __name__ == "__main__":
    app()
