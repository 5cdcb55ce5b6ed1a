"""
Bitbucket Cloud webhook event catalog.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME


class Event(str, Enum):
    """Bitbucket Cloud event keys, as sent in ``X-Event-Key``."""
    REPO_PUSH = "repo:push"
    REPO_FORK = "repo:fork"
    REPO_UPDATED = "repo:updated"
    REPO_COMMIT_COMMENT_CREATED = "repo:commit_comment_created"
    REPO_COMMIT_STATUS_CREATED = "repo:commit_status_created"
    REPO_COMMIT_STATUS_UPDATED = "repo:commit_status_updated"
    ISSUE_CREATED = "issue:created"
    ISSUE_UPDATED = "issue:updated"
    ISSUE_COMMENT_CREATED = "issue:comment_created"
    PULL_REQUEST_CREATED = "pullrequest:created"
    PULL_REQUEST_UPDATED = "pullrequest:updated"
    PULL_REQUEST_APPROVED = "pullrequest:approved"
    PULL_REQUEST_UNAPPROVED = "pullrequest:unapproved"
    PULL_REQUEST_MERGED = "pullrequest:fulfilled"
    PULL_REQUEST_DECLINED = "pullrequest:rejected"
    PULL_REQUEST_COMMENT_CREATED = "pullrequest:comment_created"
    PULL_REQUEST_COMMENT_UPDATED = "pullrequest:comment_updated"
    # Bitbucket really does send this one with an underscore.
    PULL_REQUEST_COMMENT_DELETED = "pull_request:comment_deleted"


class Href(Schema):
    href: str = ""


class Links(Schema):
    avatar: Href = Field(default_factory=Href)
    html: Href = Field(default_factory=Href)
    self_link: Href = Field(default_factory=Href, alias="self")


class LinksHTMLSelf(Schema):
    html: Href = Field(default_factory=Href)
    self_link: Href = Field(default_factory=Href, alias="self")


class LinksSelfCommit(Schema):
    self_link: Href = Field(default_factory=Href, alias="self")
    commit: Href = Field(default_factory=Href)


class LinksHTMLSelfCommits(Schema):
    self_link: Href = Field(default_factory=Href, alias="self")
    commits: Href = Field(default_factory=Href)
    html: Href = Field(default_factory=Href)


class LinksHTMLDiffCommits(Schema):
    html: Href = Field(default_factory=Href)
    diff: Href = Field(default_factory=Href)
    commits: Href = Field(default_factory=Href)


class User(Schema):
    username: str = ""
    display_name: str = ""
    uuid: str = ""
    links: Links = Field(default_factory=Links)


class Repository(Schema):
    links: Links = Field(default_factory=Links)
    uuid: str = ""
    full_name: str = ""
    name: str = ""
    scm: str = ""
    is_private: bool = False


class Content(Schema):
    html: str = ""
    markup: str = ""
    raw: str = ""


class Named(Schema):
    name: str = ""


class CommitHash(Schema):
    hash: str = ""


class ParentID(Schema):
    id: int = 0


class Inline(Schema):
    path: str = ""
    from_: Optional[int] = Field(None, alias="from")
    to: int = 0


class Issue(Schema):
    id: int = 0
    component: str = ""
    title: str = ""
    content: Content = Field(default_factory=Content)
    priority: str = ""
    state: str = ""
    type: str = ""
    milestone: Named = Field(default_factory=Named)
    version: Named = Field(default_factory=Named)
    created_on: datetime = ZERO_TIME
    updated_on: datetime = ZERO_TIME
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class Comment(Schema):
    id: int = 0
    parent: ParentID = Field(default_factory=ParentID)
    content: Content = Field(default_factory=Content)
    inline: Inline = Field(default_factory=Inline)
    created_on: datetime = ZERO_TIME
    updated_on: datetime = ZERO_TIME
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class Endpoint(Schema):
    """Source or destination side of a pull request."""
    branch: Named = Field(default_factory=Named)
    commit: CommitHash = Field(default_factory=CommitHash)
    repository: Repository = Field(default_factory=Repository)


class PullRequest(Schema):
    id: int = 0
    title: str = ""
    description: str = ""
    state: str = ""
    author: User = Field(default_factory=User)
    source: Endpoint = Field(default_factory=Endpoint)
    destination: Endpoint = Field(default_factory=Endpoint)
    merge_commit: CommitHash = Field(default_factory=CommitHash)
    participants: list[User] = Field(default_factory=list)
    reviewers: list[User] = Field(default_factory=list)
    close_source_branch: bool = False
    closed_by: User = Field(default_factory=User)
    reason: str = ""
    created_on: datetime = ZERO_TIME
    updated_on: datetime = ZERO_TIME
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class Approval(Schema):
    date: datetime = ZERO_TIME
    user: User = Field(default_factory=User)


class IssueChangeStatus(Schema):
    old: str = ""
    new: str = ""


class IssueChanges(Schema):
    status: IssueChangeStatus = Field(default_factory=IssueChangeStatus)


class CommitStatus(Schema):
    name: str = ""
    description: str = ""
    state: str = ""
    key: str = ""
    url: str = ""
    type: str = ""
    created_on: datetime = ZERO_TIME
    updated_on: datetime = ZERO_TIME
    links: LinksSelfCommit = Field(default_factory=LinksSelfCommit)


class Parent(Schema):
    type: str = ""
    hash: str = ""
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class Target(Schema):
    type: str = ""
    hash: str = ""
    author: User = Field(default_factory=User)
    message: str = ""
    date: datetime = ZERO_TIME
    parents: list[Parent] = Field(default_factory=list)
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class Commit(Schema):
    hash: str = ""
    type: str = ""
    message: str = ""
    author: User = Field(default_factory=User)
    links: LinksHTMLSelf = Field(default_factory=LinksHTMLSelf)


class ChangeData(Schema):
    type: str = ""
    name: str = ""
    target: Target = Field(default_factory=Target)
    links: LinksHTMLSelfCommits = Field(default_factory=LinksHTMLSelfCommits)


class Change(Schema):
    new: ChangeData = Field(default_factory=ChangeData)
    old: ChangeData = Field(default_factory=ChangeData)
    links: LinksHTMLDiffCommits = Field(default_factory=LinksHTMLDiffCommits)
    created: bool = False
    forced: bool = False
    closed: bool = False
    commits: list[Commit] = Field(default_factory=list)
    truncated: bool = False


class Push(Schema):
    changes: list[Change] = Field(default_factory=list)


# Event payloads

class RepositoryEventPayload(Payload):
    actor: User = Field(default_factory=User)
    repository: Repository = Field(default_factory=Repository)


class RepoPushPayload(RepositoryEventPayload):
    push: Push = Field(default_factory=Push)


class RepoForkPayload(RepositoryEventPayload):
    fork: Repository = Field(default_factory=Repository)


class RepoUpdatedPayload(RepositoryEventPayload):
    # Keyed by attribute name, each value an {"old": ..., "new": ...} pair.
    changes: dict[str, Any] = Field(default_factory=dict)


class RepoCommitCommentCreatedPayload(RepositoryEventPayload):
    comment: Comment = Field(default_factory=Comment)
    commit: CommitHash = Field(default_factory=CommitHash)


class RepoCommitStatusCreatedPayload(RepositoryEventPayload):
    commit_status: CommitStatus = Field(default_factory=CommitStatus)


class RepoCommitStatusUpdatedPayload(RepositoryEventPayload):
    commit_status: CommitStatus = Field(default_factory=CommitStatus)


class IssueCreatedPayload(RepositoryEventPayload):
    issue: Issue = Field(default_factory=Issue)


class IssueUpdatedPayload(RepositoryEventPayload):
    issue: Issue = Field(default_factory=Issue)
    comment: Comment = Field(default_factory=Comment)
    changes: IssueChanges = Field(default_factory=IssueChanges)


class IssueCommentCreatedPayload(RepositoryEventPayload):
    issue: Issue = Field(default_factory=Issue)
    comment: Comment = Field(default_factory=Comment)


class PullRequestEventPayload(RepositoryEventPayload):
    pull_request: PullRequest = Field(default_factory=PullRequest, alias="pullrequest")


class PullRequestCreatedPayload(PullRequestEventPayload):
    pass


class PullRequestUpdatedPayload(PullRequestEventPayload):
    pass


class PullRequestApprovedPayload(PullRequestEventPayload):
    approval: Approval = Field(default_factory=Approval)


class PullRequestUnapprovedPayload(PullRequestEventPayload):
    approval: Approval = Field(default_factory=Approval)


class PullRequestMergedPayload(PullRequestEventPayload):
    pass


class PullRequestDeclinedPayload(PullRequestEventPayload):
    pass


class PullRequestCommentCreatedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)


class PullRequestCommentUpdatedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)


class PullRequestCommentDeletedPayload(PullRequestEventPayload):
    comment: Comment = Field(default_factory=Comment)


_PAYLOADS = {
    Event.REPO_PUSH: RepoPushPayload,
    Event.REPO_FORK: RepoForkPayload,
    Event.REPO_UPDATED: RepoUpdatedPayload,
    Event.REPO_COMMIT_COMMENT_CREATED: RepoCommitCommentCreatedPayload,
    Event.REPO_COMMIT_STATUS_CREATED: RepoCommitStatusCreatedPayload,
    Event.REPO_COMMIT_STATUS_UPDATED: RepoCommitStatusUpdatedPayload,
    Event.ISSUE_CREATED: IssueCreatedPayload,
    Event.ISSUE_UPDATED: IssueUpdatedPayload,
    Event.ISSUE_COMMENT_CREATED: IssueCommentCreatedPayload,
    Event.PULL_REQUEST_CREATED: PullRequestCreatedPayload,
    Event.PULL_REQUEST_UPDATED: PullRequestUpdatedPayload,
    Event.PULL_REQUEST_APPROVED: PullRequestApprovedPayload,
    Event.PULL_REQUEST_UNAPPROVED: PullRequestUnapprovedPayload,
    Event.PULL_REQUEST_MERGED: PullRequestMergedPayload,
    Event.PULL_REQUEST_DECLINED: PullRequestDeclinedPayload,
    Event.PULL_REQUEST_COMMENT_CREATED: PullRequestCommentCreatedPayload,
    Event.PULL_REQUEST_COMMENT_UPDATED: PullRequestCommentUpdatedPayload,
    Event.PULL_REQUEST_COMMENT_DELETED: PullRequestCommentDeletedPayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
