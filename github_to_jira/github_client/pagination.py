"""Cursor based pagination of GraphQL connections."""

import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from ..exceptions import QueryExecutionFailure
from .models import GraphQLResponse

logger = logging.getLogger(__name__)


class GraphQLExecutor(Protocol):
    """Anything that can execute a GraphQL document."""

    def execute(
        self, query: str, variables: dict[str, Any] | None = None
    ) -> GraphQLResponse: ...


def resolve_path(data: dict[str, Any] | None, path: Sequence[str]) -> Any:
    """Walk nested response objects, returning None as soon as a level is missing."""
    current: Any = data
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def fetch_all_nodes(
    client: GraphQLExecutor,
    query_factory: Callable[[str | None], str],
    connection_path: Sequence[str],
    variables: dict[str, Any] | None = None,
) -> list[Any]:
    """Fetch every node of a GraphQL connection by following its cursor.

    The ``endCursor`` of page n is passed to ``query_factory`` to build the
    query for page n+1, until ``pageInfo.hasNextPage`` is false. Nodes are
    returned exactly as received, null placeholders for inaccessible
    resources included, so callers can count them.

    Args:
        client: GraphQL executor
        query_factory: Builds the query for the page after the given cursor
        connection_path: Keys leading from ``data`` to the connection object
        variables: Variables passed with every page

    Returns:
        Raw nodes of all pages, in page order

    Raises:
        QueryExecutionFailure: If a page reports errors or the connection
            cannot be found in the response
    """
    nodes: list[Any] = []
    cursor: str | None = None
    page = 0

    while True:
        response = client.execute(query_factory(cursor), variables)
        if response.has_errors:
            raise QueryExecutionFailure(
                f"GraphQL query failed: {response.error_message}",
                errors=response.error_messages,
            )

        connection = resolve_path(response.data, connection_path)
        if not isinstance(connection, dict):
            raise QueryExecutionFailure(
                f"GraphQL response has no {'.'.join(connection_path)}"
            )

        page_nodes = connection.get("nodes") or []
        nodes.extend(page_nodes)
        page += 1
        logger.debug(f"Page {page}: {len(page_nodes)} nodes ({len(nodes)} total)")

        page_info = connection.get("pageInfo") or {}
        if not page_info.get("hasNextPage"):
            break

        cursor = page_info.get("endCursor")
        if cursor is None:
            raise QueryExecutionFailure(
                f"GraphQL page {page} has a next page but no end cursor"
            )

    return nodes
