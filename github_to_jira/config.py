"""Configuration for the GitHub and Jira integrations."""

import os

from pydantic import BaseModel, Field, field_validator

# Environment variable read for each setting
ENV_VARIABLES = {
    "github_token": "GITHUB_TOKEN",
    "organization": "GITHUB_ORGANIZATION",
    "repository": "GITHUB_REPOSITORY",
    "jira_server": "JIRA_SERVER",
    "jira_token": "JIRA_TOKEN",
    "jira_project": "JIRA_PROJECT",
    "pull_request_field_id": "JIRA_PULL_REQUEST_FIELD_ID",
    "pull_request_field_name": "JIRA_PULL_REQUEST_FIELD_NAME",
    "issue_type_bug": "JIRA_ISSUE_TYPE_BUG",
    "issue_type_component_upgrade": "JIRA_ISSUE_TYPE_COMPONENT_UPGRADE",
    "issue_type_feature": "JIRA_ISSUE_TYPE_FEATURE",
    "assignee": "JIRA_ASSIGNEE",
    "component": "JIRA_COMPONENT",
    "transition_to_state": "JIRA_TRANSITION_TO_STATE",
    "testing_run": "TESTING_RUN",
    "timeout": "TIMEOUT",
}


class AppConfig(BaseModel):
    """Settings consumed by the GitHub and Jira clients.

    Values are read from environment variables by ``from_env``; the CLI loads
    a ``.env`` file first so the same names can live there.
    """

    github_token: str | None = Field(None, description="GitHub token with read:project scope")
    organization: str = Field("quarkusio", description="GitHub organization owning the projects")
    repository: str = Field("quarkus", description="Repository used for single PR lookups")

    jira_server: str = Field("https://issues.redhat.com", description="Jira base URL")
    jira_token: str | None = Field(None, description="Jira personal access token")
    jira_project: str = Field("QUARKUS", description="Jira project key")
    pull_request_field_id: str = Field(
        "customfield_12310220", description="Custom field id holding PR URLs"
    )
    pull_request_field_name: str = Field(
        "Git Pull Request", description="Name of the PR custom field as used in JQL"
    )
    issue_type_bug: int = Field(1, description="Jira issue type id for bugs")
    issue_type_component_upgrade: int = Field(
        17, description="Jira issue type id for component upgrades"
    )
    issue_type_feature: int = Field(2, description="Jira issue type id for features")
    assignee: str | None = Field(None, description="Assignee of created tickets")
    component: str = Field("team/eng", description="Component set on created tickets")
    transition_to_state: int = Field(
        0, description="Transition applied after creation, 0 disables it"
    )
    testing_run: bool = Field(
        True, description="Mark created tickets as test tickets to be ignored"
    )
    timeout: float = Field(30.0, gt=0, description="Network timeout in seconds")

    @field_validator("jira_server")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build the configuration from environment variables.

        Unset or blank variables keep their defaults. Other values are
        validated by the model, so ``TESTING_RUN=ture`` or ``TIMEOUT=soon``
        raise a ``ValidationError`` instead of being guessed.
        """
        values = {}
        for field, variable in ENV_VARIABLES.items():
            value = os.getenv(variable)
            if value is not None and value.strip():
                values[field] = value.strip()
        return cls(**values)

    def validate_github(self) -> None:
        """Raise if the GitHub settings are incomplete."""
        if not self.github_token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

    def validate_jira(self) -> None:
        """Raise if the Jira settings are incomplete."""
        if not self.jira_token:
            raise ValueError(
                "Jira token is required. Set JIRA_TOKEN environment variable."
            )
