"""JQL query building and fix version translation."""

from collections.abc import Iterable

DEFAULT_PULL_REQUEST_FIELD_NAME = "Git Pull Request"


def fix_version_to_jira_version(fix_version: str) -> str:
    """Convert a GitHub fix version to the value of the Jira fixVersion field.

    Example:
        >>> fix_version_to_jira_version("3.20.4")
        '3.20.4.GA'
    """
    return f"{fix_version}.GA"


def fix_version_to_jira_wildcard(fix_version: str) -> str:
    """Convert a fix version to a wildcard matching its whole minor stream.

    The wildcard is used to filter the Jira fixVersion field, e.g.
    ``fixVersion ~ "3.27.*"``.

    Example:
        >>> fix_version_to_jira_wildcard("3.27.1")
        '3.27.*'
        >>> fix_version_to_jira_wildcard("3")
        '3.*'
    """
    parts = fix_version.split(".")
    if len(parts) >= 2:
        return f"{parts[0]}.{parts[1]}.*"
    return f"{fix_version}.*"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_ticket_search_clause(
    pr_urls: Iterable[str], field_name: str = DEFAULT_PULL_REQUEST_FIELD_NAME
) -> str:
    """Build a clause matching tickets that reference any of the PR URLs.

    The PR link field does not support the IN operator, so every URL gets
    its own ``~`` comparison joined with ``or``.

    Args:
        pr_urls: Pull request URLs, at least one
        field_name: Name of the PR link custom field

    Returns:
        Parenthesized JQL clause

    Raises:
        ValueError: If no URL is given

    Example:
        >>> build_ticket_search_clause(["u1", "u2"])
        '("Git Pull Request" ~ "u1" or "Git Pull Request" ~ "u2")'
    """
    clauses = [f"{_quote(field_name)} ~ {_quote(url)}" for url in pr_urls]
    if not clauses:
        raise ValueError("At least one pull request URL is required")
    return "(" + " or ".join(clauses) + ")"


def build_ticket_search_query(
    project_key: str, fix_version_wildcard: str, pr_urls_clause: str
) -> str:
    """Build the JQL query finding tickets of a minor stream linked to some PRs.

    Example:
        >>> build_ticket_search_query("QUARKUS", "2.13.*", '("f" ~ "u")')
        'project = QUARKUS and fixVersion ~ "2.13.*" and ("f" ~ "u")'
    """
    return (
        f"project = {project_key} "
        f"and fixVersion ~ {_quote(fix_version_wildcard)} "
        f"and {pr_urls_clause}"
    )
