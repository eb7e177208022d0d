"""GraphQL query building for GitHub Projects v2."""

import json
from typing import Any

# Page size of every paginated GraphQL connection; 100 is GitHub's maximum.
PAGE_SIZE = 100

# Name of the project single select field holding the fix version.
STATUS_FIELD_NAME = "Status"


def build_project_discovery_query() -> str:
    """Build the query listing the projects of an organization.

    Only the first 100 projects are requested. Each project carries the
    options of its "Status" field, which are the candidate fix versions.

    Variables:
        organization: Organization login
    """
    return f"""
query ($organization: String!) {{
  organization(login: $organization) {{
    projectsV2(first: {PAGE_SIZE}) {{
      nodes {{
        title
        number
        field(name: "{STATUS_FIELD_NAME}") {{
          ... on ProjectV2SingleSelectField {{
            options {{
              id
              name
            }}
          }}
        }}
      }}
    }}
  }}
}}
"""


def build_pull_request_page_query(after_cursor: str | None = None) -> str:
    """Build the query for one page of project items.

    Args:
        after_cursor: ``endCursor`` of the previous page, None for the first page

    Variables:
        organization: Organization login
        projectNumber: Project number

    Example:
        >>> "after:" in build_pull_request_page_query("Y3Vyc29yOjEwMA==")
        True
    """
    if after_cursor is None:
        items_args = f"first: {PAGE_SIZE}"
    else:
        items_args = f"first: {PAGE_SIZE}, after: {json.dumps(after_cursor)}"

    return f"""
query ($organization: String!, $projectNumber: Int!) {{
  organization(login: $organization) {{
    projectV2(number: $projectNumber) {{
      items({items_args}) {{
        nodes {{
          status: fieldValueByName(name: "{STATUS_FIELD_NAME}") {{
            ... on ProjectV2ItemFieldSingleSelectValue {{
              fixVersion: name
            }}
          }}
          content {{
            ... on PullRequest {{
              url
              title
              number
              bodyText
            }}
          }}
        }}
        pageInfo {{
          endCursor
          hasNextPage
        }}
      }}
    }}
  }}
}}
"""


def build_pull_request_query() -> str:
    """Build the query fetching a single pull request of a repository.

    Variables:
        owner: Repository owner
        repository: Repository name
        number: Pull request number
    """
    return """
query ($owner: String!, $repository: String!, $number: Int!) {
  repository(owner: $owner, name: $repository) {
    pullRequest(number: $number) {
      url
      title
      number
      bodyText
    }
  }
}
"""


def status_field_value(node: dict[str, Any]) -> str | None:
    """Return the fix version an item's "Status" field is set to.

    Args:
        node: Project item node from ``build_pull_request_page_query``

    Returns:
        The selected option name, or None if the field is unset
    """
    status = node.get("status")
    if not isinstance(status, dict):
        return None
    return status.get("fixVersion")
