"""Offset based pagination of Jira searches."""

import logging
from typing import Protocol

from .models import JiraSearchIssue

logger = logging.getLogger(__name__)

# Page size of Jira searches
SEARCH_PAGE_SIZE = 50


class JiraSearcher(Protocol):
    """Anything that can return one page of a JQL search."""

    def search_page(
        self,
        jql: str,
        page_size: int,
        offset: int,
        fields: list[str] | None = None,
    ) -> list[JiraSearchIssue]: ...


def fetch_all_issues(
    searcher: JiraSearcher,
    jql: str,
    page_size: int = SEARCH_PAGE_SIZE,
    fields: list[str] | None = None,
) -> list[JiraSearchIssue]:
    """Fetch every issue matching a JQL query, one page at a time.

    Page p is requested at offset ``p * page_size``. A page holding fewer
    than ``page_size`` issues is the last one. Errors propagate from the
    searcher; issues fetched before them are discarded.

    Args:
        searcher: Jira search executor
        jql: JQL query
        page_size: Number of issues per page
        fields: Field ids to include in each issue

    Returns:
        Issues of all pages, in result order
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    issues: list[JiraSearchIssue] = []
    page = 0
    while True:
        page_issues = searcher.search_page(jql, page_size, page * page_size, fields)
        issues.extend(page_issues)
        page += 1
        logger.debug(f"Search page {page}: {len(page_issues)} issues")
        if len(page_issues) < page_size:
            break
    return issues
