"""
Bitbucket Server (Data Center) webhook event catalog.

Wire keys are camelCase; record fields use their snake_case spelling and
are aliased through ``to_camel``. Entity dates such as ``createdDate`` are
epoch milliseconds, while the event ``date`` uses
``2006-01-02T15:04:05Z0700``.
"""
from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME, BitbucketServerTime


class Event(str, Enum):
    """Bitbucket Server event keys, as sent in ``X-Event-Key``."""
    REPOSITORY_REFERENCE_CHANGED = "repo:refs_changed"
    REPOSITORY_MODIFIED = "repo:modified"
    REPOSITORY_FORKED = "repo:forked"
    REPOSITORY_COMMENT_ADDED = "repo:comment:added"
    REPOSITORY_COMMENT_EDITED = "repo:comment:edited"
    REPOSITORY_COMMENT_DELETED = "repo:comment:deleted"
    PULL_REQUEST_OPENED = "pr:opened"
    PULL_REQUEST_FROM_REFERENCE_UPDATED = "pr:from_ref_updated"
    PULL_REQUEST_MODIFIED = "pr:modified"
    PULL_REQUEST_MERGED = "pr:merged"
    PULL_REQUEST_DECLINED = "pr:declined"
    PULL_REQUEST_DELETED = "pr:deleted"
    PULL_REQUEST_REVIEWER_UPDATED = "pr:reviewer:updated"
    PULL_REQUEST_REVIEWER_APPROVED = "pr:reviewer:approved"
    PULL_REQUEST_REVIEWER_UNAPPROVED = "pr:reviewer:unapproved"
    PULL_REQUEST_REVIEWER_NEEDS_WORK = "pr:reviewer:needs_work"
    PULL_REQUEST_COMMENT_ADDED = "pr:comment:added"
    PULL_REQUEST_COMMENT_EDITED = "pr:comment:edited"
    PULL_REQUEST_COMMENT_DELETED = "pr:comment:deleted"
    DIAGNOSTICS_PING = "diagnostics:ping"


class CamelSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel)


class User(CamelSchema):
    id: int = 0
    name: str = ""
    email_address: str = ""
    display_name: str = ""
    active: bool = False
    slug: str = ""
    type: str = ""
    links: dict[str, Any] = Field(default_factory=dict)


class Project(CamelSchema):
    id: int = 0
    key: str = ""
    name: str = ""
    type: str = ""
    public: Optional[bool] = None
    owner: User = Field(default_factory=User)
    links: dict[str, Any] = Field(default_factory=dict)


class Repository(CamelSchema):
    id: int = 0
    slug: str = ""
    name: str = ""
    scm_id: str = ""
    state: str = ""
    status_message: str = ""
    forkable: bool = False
    origin: Optional["Repository"] = None
    project: Project = Field(default_factory=Project)
    public: bool = False
    links: dict[str, Any] = Field(default_factory=dict)


class RepositoryReference(CamelSchema):
    id: str = ""
    display_id: str = ""
    type: str = ""
    latest_commit: str = ""
    repository: Repository = Field(default_factory=Repository)


class RepositoryChange(CamelSchema):
    ref: RepositoryReference = Field(default_factory=RepositoryReference)
    ref_id: str = ""
    from_hash: str = ""
    to_hash: str = ""
    type: str = ""


class PullRequestParticipant(CamelSchema):
    user: User = Field(default_factory=User)
    last_reviewed_commit: str = ""
    role: str = ""
    approved: bool = False
    status: str = ""


class PullRequest(CamelSchema):
    id: int = 0
    version: int = 0
    title: str = ""
    description: str = ""
    state: str = ""
    open: bool = False
    closed: bool = False
    created_date: int = 0
    updated_date: int = 0
    closed_date: int = 0
    from_ref: RepositoryReference = Field(default_factory=RepositoryReference)
    to_ref: RepositoryReference = Field(default_factory=RepositoryReference)
    locked: bool = False
    author: PullRequestParticipant = Field(default_factory=PullRequestParticipant)
    reviewers: list[PullRequestParticipant] = Field(default_factory=list)
    participants: list[PullRequestParticipant] = Field(default_factory=list)
    properties: dict[str, Any] = Field(default_factory=dict)
    links: dict[str, Any] = Field(default_factory=dict)


class Comment(CamelSchema):
    id: int = 0
    properties: dict[str, Any] = Field(default_factory=dict)
    version: int = 0
    text: str = ""
    author: User = Field(default_factory=User)
    created_date: int = 0
    updated_date: int = 0
    comments: list[dict[str, Any]] = Field(default_factory=list)
    tasks: list[dict[str, Any]] = Field(default_factory=list)
    permitted_operations: dict[str, Any] = Field(default_factory=dict)


# Event payloads

class DiagnosticsPingPayload(Payload):
    """Sent by the "Test connection" button; carries nothing."""


class EventPayload(Payload):
    model_config = ConfigDict(alias_generator=to_camel)

    date: BitbucketServerTime = ZERO_TIME
    event_key: str = ""
    actor: User = Field(default_factory=User)


class RepositoryReferenceChangedPayload(EventPayload):
    repository: Repository = Field(default_factory=Repository)
    changes: list[RepositoryChange] = Field(default_factory=list)


class RepositoryModifiedPayload(EventPayload):
    old: Repository = Field(default_factory=Repository)
    new: Repository = Field(default_factory=Repository)


class RepositoryForkedPayload(EventPayload):
    repository: Repository = Field(default_factory=Repository)


class RepositoryCommentPayload(EventPayload):
    comment: Comment = Field(default_factory=Comment)
    repository: Repository = Field(default_factory=Repository)
    commit: str = ""


class RepositoryCommentAddedPayload(RepositoryCommentPayload):
    pass


class RepositoryCommentEditedPayload(RepositoryCommentPayload):
    previous_comment: str = ""


class RepositoryCommentDeletedPayload(RepositoryCommentPayload):
    pass


class PullRequestEventPayload(EventPayload):
    pull_request: PullRequest = Field(default_factory=PullRequest)


class PullRequestOpenedPayload(PullRequestEventPayload):
    pass


class PullRequestFromReferenceUpdatedPayload(PullRequestEventPayload):
    previous_from_hash: str = ""


class PullRequestModifiedPayload(PullRequestEventPayload):
    previous_title: str = ""
    previous_description: str = ""
    previous_target: dict[str, Any] = Field(default_factory=dict)


class PullRequestMergedPayload(PullRequestEventPayload):
    pass


class PullRequestDeclinedPayload(PullRequestEventPayload):
    pass


class PullRequestDeletedPayload(PullRequestEventPayload):
    pass


class PullRequestReviewerUpdatedPayload(PullRequestEventPayload):
    removed_reviewers: list[User] = Field(default_factory=list)
    added_reviewers: list[User] = Field(default_factory=list)


class PullRequestReviewPayload(PullRequestEventPayload):
    participant: PullRequestParticipant = Field(default_factory=PullRequestParticipant)
    previous_status: str = ""


class PullRequestReviewerApprovedPayload(PullRequestReviewPayload):
    pass


class PullRequestReviewerUnapprovedPayload(PullRequestReviewPayload):
    pass


class PullRequestReviewerNeedsWorkPayload(PullRequestReviewPayload):
    pass


class PullRequestCommentAddedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)
    comment_parent_id: int = 0


class PullRequestCommentEditedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)
    # Edited deliveries send the parent id as a string.
    comment_parent_id: str = ""
    previous_comment: str = ""


class PullRequestCommentDeletedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)
    comment_parent_id: int = 0


_PAYLOADS = {
    Event.REPOSITORY_REFERENCE_CHANGED: RepositoryReferenceChangedPayload,
    Event.REPOSITORY_MODIFIED: RepositoryModifiedPayload,
    Event.REPOSITORY_FORKED: RepositoryForkedPayload,
    Event.REPOSITORY_COMMENT_ADDED: RepositoryCommentAddedPayload,
    Event.REPOSITORY_COMMENT_EDITED: RepositoryCommentEditedPayload,
    Event.REPOSITORY_COMMENT_DELETED: RepositoryCommentDeletedPayload,
    Event.PULL_REQUEST_OPENED: PullRequestOpenedPayload,
    Event.PULL_REQUEST_FROM_REFERENCE_UPDATED: PullRequestFromReferenceUpdatedPayload,
    Event.PULL_REQUEST_MODIFIED: PullRequestModifiedPayload,
    Event.PULL_REQUEST_MERGED: PullRequestMergedPayload,
    Event.PULL_REQUEST_DECLINED: PullRequestDeclinedPayload,
    Event.PULL_REQUEST_DELETED: PullRequestDeletedPayload,
    Event.PULL_REQUEST_REVIEWER_UPDATED: PullRequestReviewerUpdatedPayload,
    Event.PULL_REQUEST_REVIEWER_APPROVED: PullRequestReviewerApprovedPayload,
    Event.PULL_REQUEST_REVIEWER_UNAPPROVED: PullRequestReviewerUnapprovedPayload,
    Event.PULL_REQUEST_REVIEWER_NEEDS_WORK: PullRequestReviewerNeedsWorkPayload,
    Event.PULL_REQUEST_COMMENT_ADDED: PullRequestCommentAddedPayload,
    Event.PULL_REQUEST_COMMENT_EDITED: PullRequestCommentEditedPayload,
    Event.PULL_REQUEST_COMMENT_DELETED: PullRequestCommentDeletedPayload,
    Event.DIAGNOSTICS_PING: DiagnosticsPingPayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
