"""
Docker Hub webhook payload.
"""
from enum import Enum

from pydantic import Field

from ..webhook.models import Payload, Schema


class Event(str, Enum):
    """Docker Hub sends a single kind of delivery."""
    BUILD = "build"


class PushData(Schema):
    images: list[str] = Field(default_factory=list)
    pushed_at: float = 0.0
    pusher: str = ""
    tag: str = ""


class Repository(Schema):
    comment_count: int = 0
    date_created: float = 0.0
    description: str = ""
    dockerfile: str = ""
    full_description: str = ""
    is_official: bool = False
    is_private: bool = False
    is_trusted: bool = False
    name: str = ""
    namespace: str = ""
    owner: str = ""
    repo_name: str = ""
    repo_url: str = ""
    star_count: int = 0
    status: str = ""


class BuildPayload(Payload):
    callback_url: str = ""
    push_data: PushData = Field(default_factory=PushData)
    repository: Repository = Field(default_factory=Repository)


PAYLOADS: dict[str, type[Payload]] = {Event.BUILD.value: BuildPayload}
