"""
Azure DevOps service hook event catalog.

Azure DevOps names the event in the body's ``eventType`` field rather than
in a header. Timestamps are RFC 3339 with up to nanosecond precision.
"""
from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME, AzureTime


class Event(str, Enum):
    """Azure DevOps ``eventType`` values."""
    BUILD_COMPLETE = "build.complete"
    GIT_PUSH = "git.push"
    GIT_PULL_REQUEST_CREATED = "git.pullrequest.created"
    GIT_PULL_REQUEST_UPDATED = "git.pullrequest.updated"
    GIT_PULL_REQUEST_MERGED = "git.pullrequest.merged"


class CamelSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel)


class Message(CamelSchema):
    text: str = ""
    html: str = ""
    markdown: str = ""


class Commit(CamelSchema):
    commit_id: str = ""
    url: str = ""


class Project(CamelSchema):
    id: str = ""
    name: str = ""
    url: str = ""
    state: str = ""


class Repository(CamelSchema):
    id: str = ""
    name: str = ""
    url: str = ""
    project: Project = Field(default_factory=Project)
    default_branch: str = ""
    remote_url: str = ""


class User(CamelSchema):
    id: str = ""
    display_name: str = ""
    unique_name: str = ""
    url: str = ""
    image_url: str = ""


class Reviewer(User):
    reviewer_url: str = ""
    vote: int = 0
    is_container: bool = False


class PullRequest(CamelSchema):
    repository: Repository = Field(default_factory=Repository)
    pull_request_id: int = 0
    status: str = ""
    created_by: User = Field(default_factory=User)
    creation_date: AzureTime = ZERO_TIME
    closed_date: AzureTime = ZERO_TIME
    title: str = ""
    description: str = ""
    source_ref_name: str = ""
    target_ref_name: str = ""
    merge_status: str = ""
    merge_id: str = ""
    last_merge_source_commit: Commit = Field(default_factory=Commit)
    last_merge_target_commit: Commit = Field(default_factory=Commit)
    last_merge_commit: Commit = Field(default_factory=Commit)
    reviewers: list[Reviewer] = Field(default_factory=list)
    commits: list[Commit] = Field(default_factory=list)
    url: str = ""


class Drop(CamelSchema):
    location: str = ""
    type: str = ""
    url: str = ""
    download_url: str = ""


class Log(CamelSchema):
    type: str = ""
    url: str = ""
    download_url: str = ""


class BuildDefinition(CamelSchema):
    batch_size: int = 0
    trigger_type: str = ""
    definition_type: str = ""
    id: int = 0
    name: str = ""
    url: str = ""


class Queue(CamelSchema):
    queue_type: str = ""
    id: int = 0
    name: str = ""
    url: str = ""


class Request(CamelSchema):
    id: int = 0
    url: str = ""
    requested_for: User = Field(default_factory=User)


class Build(CamelSchema):
    uri: str = ""
    id: int = 0
    build_number: str = ""
    url: str = ""
    start_time: AzureTime = ZERO_TIME
    finish_time: AzureTime = ZERO_TIME
    reason: str = ""
    status: str = ""
    drop_location: str = ""
    drop: Drop = Field(default_factory=Drop)
    log: Log = Field(default_factory=Log)
    source_get_version: str = ""
    last_changed_by: User = Field(default_factory=User)
    retain_indefinitely: bool = False
    has_diagnostics: bool = False
    definition: BuildDefinition = Field(default_factory=BuildDefinition)
    queue: Queue = Field(default_factory=Queue)
    requests: list[Request] = Field(default_factory=list)


class GitUserDate(CamelSchema):
    name: str = ""
    email: str = ""
    date: AzureTime = ZERO_TIME


class PushCommit(CamelSchema):
    commit_id: str = ""
    author: GitUserDate = Field(default_factory=GitUserDate)
    committer: GitUserDate = Field(default_factory=GitUserDate)
    comment: str = ""
    url: str = ""


class RefUpdate(CamelSchema):
    name: str = ""
    old_object_id: str = ""
    new_object_id: str = ""


class Push(CamelSchema):
    commits: list[PushCommit] = Field(default_factory=list)
    ref_updates: list[RefUpdate] = Field(default_factory=list)
    repository: Repository = Field(default_factory=Repository)
    pushed_by: User = Field(default_factory=User)
    push_id: int = 0
    date: AzureTime = ZERO_TIME
    url: str = ""


# Event payloads

class BasicEvent(Payload):
    """Envelope fields common to every event; also used to read ``eventType``."""

    model_config = ConfigDict(alias_generator=to_camel)

    id: str = ""
    event_type: str = ""
    publisher_id: str = ""
    scope: str = ""
    created_date: AzureTime = ZERO_TIME


class ResourceEvent(BasicEvent):
    message: Message = Field(default_factory=Message)
    detailed_message: Message = Field(default_factory=Message)
    resource_version: str = ""
    resource_containers: Any = None


class BuildCompleteEvent(ResourceEvent):
    resource: Build = Field(default_factory=Build)


class GitPushEvent(ResourceEvent):
    resource: Push = Field(default_factory=Push)


class GitPullRequestEvent(ResourceEvent):
    resource: PullRequest = Field(default_factory=PullRequest)


_PAYLOADS = {
    Event.BUILD_COMPLETE: BuildCompleteEvent,
    Event.GIT_PUSH: GitPushEvent,
    Event.GIT_PULL_REQUEST_CREATED: GitPullRequestEvent,
    Event.GIT_PULL_REQUEST_UPDATED: GitPullRequestEvent,
    Event.GIT_PULL_REQUEST_MERGED: GitPullRequestEvent,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
