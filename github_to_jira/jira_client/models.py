"""Pydantic models for Jira data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JiraSearchIssue(BaseModel):
    """One issue of a Jira search result page.

    Only the key and the raw fields are kept; the PR link field is an array of
    strings.
    """

    key: str = Field(..., description="Issue key, e.g. QUARKUS-1234")
    fields: dict[str, Any] = Field(
        default_factory=dict, description="Raw issue fields keyed by field id"
    )

    def field_strings(self, field_id: str) -> list[str]:
        """Return a field's value as a list of strings."""
        value = self.fields.get(field_id)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(item) for item in value if item]


class TicketDescriptor(BaseModel):
    """An existing Jira ticket linked to one or more pull requests."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Issue key")
    url: str = Field(..., description="Browseable issue URL")
    linked_pull_request_urls: frozenset[str] = Field(
        ..., description="PR URLs stored in the ticket's PR link field"
    )

    @field_validator("linked_pull_request_urls")
    @classmethod
    def _not_empty(cls, value: frozenset[str]) -> frozenset[str]:
        if not value:
            raise ValueError("a ticket must reference at least one pull request")
        return value

    def references(self, pr_url: str) -> bool:
        return pr_url in self.linked_pull_request_urls
