"""
Gogs webhook payloads.

Gitea grew out of Gogs and still sends the same documents, so the Gitea
records are reused; Gogs only knows a subset of the events.
"""
from enum import Enum

from ..gitea.models import (
    CreatePayload,
    DeletePayload,
    ForkPayload,
    IssueCommentPayload,
    IssuePayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
)
from ..webhook.models import Payload


class Event(str, Enum):
    """Gogs hook event types."""
    CREATE = "create"
    DELETE = "delete"
    FORK = "fork"
    PUSH = "push"
    ISSUES = "issues"
    ISSUE_COMMENT = "issue_comment"
    PULL_REQUEST = "pull_request"
    RELEASE = "release"


_PAYLOADS = {
    Event.CREATE: CreatePayload,
    Event.DELETE: DeletePayload,
    Event.FORK: ForkPayload,
    Event.PUSH: PushPayload,
    Event.ISSUES: IssuePayload,
    Event.ISSUE_COMMENT: IssueCommentPayload,
    Event.PULL_REQUEST: PullRequestPayload,
    Event.RELEASE: ReleasePayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}

__all__ = [
    "Event",
    "PAYLOADS",
    "CreatePayload",
    "DeletePayload",
    "ForkPayload",
    "IssueCommentPayload",
    "IssuePayload",
    "PullRequestPayload",
    "PushPayload",
    "ReleasePayload",
]
