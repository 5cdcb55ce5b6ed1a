"""
Shared webhook models and abstractions.
"""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class GitProvider(str, Enum):
    """Supported webhook providers."""
    GITHUB = "github"
    GITLAB = "gitlab"
    GITEA = "gitea"
    GITEE = "gitee"
    GOGS = "gogs"
    BITBUCKET = "bitbucket"
    BITBUCKET_SERVER = "bitbucket-server"
    AZURE_DEVOPS = "azuredevops"
    DOCKERHUB = "dockerhub"


class WebhookConfig(BaseModel):
    """Credentials a parser verifies deliveries against."""

    provider: GitProvider
    secret: str = Field("", description="Shared secret or token; empty disables verification")
    username: str = Field("", description="Basic auth username")
    password: str = Field("", description="Basic auth password")
    uuid: str = Field("", description="Webhook instance UUID")


class Schema(BaseModel):
    """Base for every record of the event catalog.

    Unknown keys are ignored and explicit ``null`` values are dropped before
    validation, so a null field falls back to its default.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Payload(Schema):
    """Base for top-level event payloads.

    ``hook_event`` holds the event tag the payload was decoded for.
    """

    _event: str = PrivateAttr(default="")

    @property
    def hook_event(self) -> str:
        return self._event

    def with_event(self, event: str) -> "Payload":
        self._event = str(event.value if isinstance(event, Enum) else event)
        return self
