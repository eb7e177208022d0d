"""Pydantic models for GitHub Projects v2 data.

These models normalize the GraphQL payloads returned by the GitHub API.
API Reference: https://docs.github.com/en/graphql/reference/objects#projectv2
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..jira_client.models import TicketDescriptor


class GraphQLResponse(BaseModel):
    """Raw GraphQL response with its error list.

    GitHub answers with HTTP 200 even when the query failed, so callers must
    check ``has_errors`` before looking at ``data``.
    """

    data: dict[str, Any] | None = Field(None, description="Response payload")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Errors reported by the API"
    )

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_messages(self) -> list[str]:
        return [str(error.get("message", error)) for error in self.errors]

    @property
    def error_message(self) -> str:
        return "; ".join(self.error_messages)


class ProjectDescriptor(BaseModel):
    """A backport tracking project board.

    Maps to the GitHub ProjectV2 object; ``versions`` are the options of the
    board's "Status" single select field.
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="Project number within the organization")
    title: str = Field(..., description="Project title")
    versions: list[str] = Field(
        default_factory=list, description="Candidate fix versions, in board order"
    )


class ProjectListing(BaseModel):
    """Result of a project discovery run."""

    projects: list[ProjectDescriptor] = Field(
        default_factory=list, description="Matching projects, highest number first"
    )
    inaccessible_count: int = Field(
        0, description="Projects returned as null because of missing permissions"
    )


class PullRequestDescriptor(BaseModel):
    """A pull request queued for backport.

    ``url`` identifies the pull request; ``linked_tickets`` is filled in later
    with the Jira tickets already referencing it.
    """

    number: int = Field(..., description="Pull request number")
    url: str = Field(..., min_length=1, description="Pull request URL")
    title: str = Field(..., description="Pull request title")
    description: str = Field("", description="Pull request body as plain text")
    linked_tickets: list[TicketDescriptor] = Field(
        default_factory=list, description="Existing Jira tickets for this PR"
    )

    def link_ticket(self, ticket: TicketDescriptor) -> bool:
        """Link a ticket unless it is already linked.

        Returns:
            True if the ticket was added
        """
        if any(existing.key == ticket.key for existing in self.linked_tickets):
            return False
        self.linked_tickets.append(ticket)
        return True
