"""
Gitea webhook event catalog.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME


class Event(str, Enum):
    """Gitea event tags, as sent in ``X-Gitea-Event``."""
    CREATE = "create"
    DELETE = "delete"
    FORK = "fork"
    ISSUES = "issues"
    ISSUE_ASSIGN = "issue_assign"
    ISSUE_LABEL = "issue_label"
    ISSUE_MILESTONE = "issue_milestone"
    ISSUE_COMMENT = "issue_comment"
    PUSH = "push"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_ASSIGN = "pull_request_assign"
    PULL_REQUEST_LABEL = "pull_request_label"
    PULL_REQUEST_MILESTONE = "pull_request_milestone"
    PULL_REQUEST_COMMENT = "pull_request_comment"
    PULL_REQUEST_REVIEW = "pull_request_review"
    PULL_REQUEST_SYNC = "pull_request_sync"
    REPOSITORY = "repository"
    RELEASE = "release"


class PayloadUser(Schema):
    name: str = ""
    email: str = ""
    username: str = ""


class PayloadCommitVerification(Schema):
    verified: bool = False
    reason: str = ""
    signature: str = ""
    signer: Optional[PayloadUser] = None
    payload: str = ""


class PayloadCommit(Schema):
    id: str = ""
    message: str = ""
    url: str = ""
    author: Optional[PayloadUser] = None
    committer: Optional[PayloadUser] = None
    verification: Optional[PayloadCommitVerification] = None
    timestamp: datetime = ZERO_TIME
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class User(Schema):
    id: int = 0
    login: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    language: str = ""
    is_admin: bool = False
    last_login: datetime = ZERO_TIME
    created: datetime = ZERO_TIME
    restricted: bool = False
    active: bool = False
    prohibit_login: bool = False
    location: str = ""
    website: str = ""
    description: str = ""
    visibility: str = ""
    followers_count: int = 0
    following_count: int = 0
    starred_repos_count: int = 0


class Permission(Schema):
    admin: bool = False
    push: bool = False
    pull: bool = False


class InternalTracker(Schema):
    enable_time_tracker: bool = False
    allow_only_contributors_to_track_time: bool = False
    enable_issue_dependencies: bool = False


class ExternalTracker(Schema):
    external_tracker_url: str = ""
    external_tracker_format: str = ""
    external_tracker_style: str = ""


class ExternalWiki(Schema):
    external_wiki_url: str = ""


class Repository(Schema):
    id: int = 0
    owner: Optional[User] = None
    name: str = ""
    full_name: str = ""
    description: str = ""
    empty: bool = False
    private: bool = False
    fork: bool = False
    template: bool = False
    parent: Optional["Repository"] = None
    mirror: bool = False
    size: int = 0
    html_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    original_url: str = ""
    website: str = ""
    stars_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    open_pr_counter: int = 0
    release_counter: int = 0
    default_branch: str = ""
    archived: bool = False
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    permissions: Optional[Permission] = None
    has_issues: bool = False
    internal_tracker: Optional[InternalTracker] = None
    external_tracker: Optional[ExternalTracker] = None
    has_wiki: bool = False
    external_wiki: Optional[ExternalWiki] = None
    has_pull_requests: bool = False
    has_projects: bool = False
    ignore_whitespace_conflicts: bool = False
    allow_merge_commits: bool = False
    allow_rebase: bool = False
    allow_rebase_explicit: bool = False
    allow_squash_merge: bool = False
    default_merge_style: str = ""
    avatar_url: str = ""
    internal: bool = False
    mirror_interval: str = ""


class Label(Schema):
    id: int = 0
    name: str = ""
    color: str = ""
    description: str = ""
    url: str = ""


class Milestone(Schema):
    id: int = 0
    title: str = ""
    description: str = ""
    state: str = ""
    open_issues: int = 0
    closed_issues: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None
    due_on: Optional[datetime] = None


class PullRequestMeta(Schema):
    merged: bool = False
    merged_at: Optional[datetime] = None


class RepositoryMeta(Schema):
    id: int = 0
    name: str = ""
    owner: str = ""
    full_name: str = ""


class Issue(Schema):
    id: int = 0
    url: str = ""
    html_url: str = ""
    number: int = 0
    user: Optional[User] = None
    original_author: str = ""
    original_author_id: int = 0
    title: str = ""
    body: str = ""
    ref: str = ""
    labels: list[Label] = Field(default_factory=list)
    milestone: Optional[Milestone] = None
    assignee: Optional[User] = None
    assignees: list[User] = Field(default_factory=list)
    state: str = ""
    is_locked: bool = False
    comments: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    closed_at: Optional[datetime] = None
    due_date: Optional[datetime] = None
    pull_request: Optional[PullRequestMeta] = None
    repository: Optional[RepositoryMeta] = None


class ChangesFromPayload(Schema):
    from_: str = Field("", alias="from")


class ChangesPayload(Schema):
    title: Optional[ChangesFromPayload] = None
    body: Optional[ChangesFromPayload] = None
    ref: Optional[ChangesFromPayload] = None


class Comment(Schema):
    id: int = 0
    html_url: str = ""
    pull_request_url: str = ""
    issue_url: str = ""
    user: Optional[User] = None
    original_author: str = ""
    original_author_id: int = 0
    body: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class PRBranchInfo(Schema):
    label: str = ""
    ref: str = ""
    sha: str = ""
    repo_id: int = 0
    repo: Optional[Repository] = None


class PullRequest(Schema):
    id: int = 0
    url: str = ""
    number: int = 0
    user: Optional[User] = None
    title: str = ""
    body: str = ""
    labels: list[Label] = Field(default_factory=list)
    milestone: Optional[Milestone] = None
    assignee: Optional[User] = None
    assignees: list[User] = Field(default_factory=list)
    state: str = ""
    is_locked: bool = False
    comments: int = 0
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    mergeable: bool = False
    merged: bool = False
    merged_at: Optional[datetime] = None
    merge_commit_sha: Optional[str] = None
    merged_by: Optional[User] = None
    base: Optional[PRBranchInfo] = None
    head: Optional[PRBranchInfo] = None
    merge_base: str = ""
    due_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None


class ReviewPayload(Schema):
    """Review attached to ``pull_request_review`` deliveries.

    Gitea documents little about this object; only the two fields it has
    been observed to send are modelled.
    """
    type: str = ""
    content: str = ""


class Attachment(Schema):
    id: int = 0
    name: str = ""
    size: int = 0
    download_count: int = 0
    created_at: datetime = ZERO_TIME
    uuid: str = ""
    browser_download_url: str = ""


class Release(Schema):
    id: int = 0
    tag_name: str = ""
    target_commitish: str = ""
    name: str = ""
    body: str = ""
    url: str = ""
    html_url: str = ""
    tarball_url: str = ""
    zipball_url: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: datetime = ZERO_TIME
    published_at: datetime = ZERO_TIME
    author: Optional[User] = None
    assets: list[Attachment] = Field(default_factory=list)


# Event payloads

class GiteaPayload(Payload):
    """Every Gitea payload carries the hook secret in its body."""
    secret: str = ""


class CreatePayload(GiteaPayload):
    sha: str = ""
    ref: str = ""
    ref_type: str = ""
    repository: Optional[Repository] = None
    sender: Optional[User] = None


class DeletePayload(GiteaPayload):
    ref: str = ""
    ref_type: str = ""
    pusher_type: str = ""
    repository: Optional[Repository] = None
    sender: Optional[User] = None


class ForkPayload(GiteaPayload):
    forkee: Optional[Repository] = None
    repository: Optional[Repository] = None
    sender: Optional[User] = None


class IssueCommentPayload(GiteaPayload):
    action: str = ""
    issue: Optional[Issue] = None
    comment: Optional[Comment] = None
    changes: Optional[ChangesPayload] = None
    repository: Optional[Repository] = None
    sender: Optional[User] = None
    is_pull: bool = False


class PushPayload(GiteaPayload):
    ref: str = ""
    before: str = ""
    after: str = ""
    compare_url: str = ""
    commits: list[PayloadCommit] = Field(default_factory=list)
    head_commit: Optional[PayloadCommit] = None
    repository: Optional[Repository] = None
    pusher: Optional[User] = None
    sender: Optional[User] = None


class PullRequestPayload(GiteaPayload):
    action: str = ""
    number: int = 0
    changes: Optional[ChangesPayload] = None
    pull_request: Optional[PullRequest] = None
    repository: Optional[Repository] = None
    sender: Optional[User] = None
    review: Optional[ReviewPayload] = None


class RepositoryPayload(GiteaPayload):
    action: str = ""
    repository: Optional[Repository] = None
    organization: Optional[User] = None
    sender: Optional[User] = None


class ReleasePayload(GiteaPayload):
    action: str = ""
    release: Optional[Release] = None
    repository: Optional[Repository] = None
    sender: Optional[User] = None


class IssuePayload(GiteaPayload):
    action: str = ""
    number: int = 0
    changes: Optional[ChangesPayload] = None
    issue: Optional[Issue] = None
    repository: Optional[Repository] = None
    sender: Optional[User] = None


_PAYLOADS = {
    Event.CREATE: CreatePayload,
    Event.DELETE: DeletePayload,
    Event.FORK: ForkPayload,
    Event.PUSH: PushPayload,
    Event.ISSUES: IssuePayload,
    Event.ISSUE_ASSIGN: IssuePayload,
    Event.ISSUE_LABEL: IssuePayload,
    Event.ISSUE_MILESTONE: IssuePayload,
    Event.ISSUE_COMMENT: IssueCommentPayload,
    Event.PULL_REQUEST_COMMENT: IssueCommentPayload,
    Event.PULL_REQUEST: PullRequestPayload,
    Event.PULL_REQUEST_ASSIGN: PullRequestPayload,
    Event.PULL_REQUEST_LABEL: PullRequestPayload,
    Event.PULL_REQUEST_MILESTONE: PullRequestPayload,
    Event.PULL_REQUEST_REVIEW: PullRequestPayload,
    Event.PULL_REQUEST_SYNC: PullRequestPayload,
    Event.REPOSITORY: RepositoryPayload,
    Event.RELEASE: ReleasePayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
