"""
Gitee webhook event catalog.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME


class Event(str, Enum):
    """Gitee hook names, as sent in ``X-Gitee-Event``."""
    PUSH = "Push Hook"
    TAG_PUSH = "Tag Push Hook"
    ISSUE = "Issue Hook"
    NOTE = "Note Hook"
    MERGE_REQUEST = "Merge Request Hook"


class UserHook(Schema):
    id: int = 0
    name: str = ""
    email: str = ""
    username: str = ""
    user_name: str = ""
    url: str = ""
    login: str = ""
    avatar_url: str = ""
    html_url: str = ""
    type: str = ""
    site_admin: bool = False
    time: datetime = ZERO_TIME
    remark: str = ""


class EnterpriseHook(Schema):
    name: str = ""
    url: str = ""


class LabelHook(Schema):
    id: int = 0
    name: str = ""
    color: str = ""


class NoteHook(Schema):
    id: int = 0
    body: str = ""
    user: UserHook = Field(default_factory=UserHook)
    created_at: str = ""
    updated_at: str = ""
    html_url: str = ""
    position: str = ""
    commit_id: str = ""


class CommitHook(Schema):
    id: str = ""
    tree_id: str = ""
    parent_ids: list[str] = Field(default_factory=list)
    message: str = ""
    timestamp: datetime = ZERO_TIME
    url: str = ""
    author: UserHook = Field(default_factory=UserHook)
    committer: UserHook = Field(default_factory=UserHook)
    distinct: bool = False
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class MilestoneHook(Schema):
    id: int = 0
    html_url: str = ""
    number: int = 0
    title: str = ""
    description: str = ""
    open_issues: int = 0
    closed_issues: int = 0
    state: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    due_on: str = ""


class IssueHook(Schema):
    id: int = 0
    html_url: str = ""
    number: str = ""
    title: str = ""
    user: UserHook = Field(default_factory=UserHook)
    labels: list[LabelHook] = Field(default_factory=list)
    state: str = ""
    state_name: str = ""
    type_name: str = ""
    assignee: UserHook = Field(default_factory=UserHook)
    collaborators: list[UserHook] = Field(default_factory=list)
    milestone: MilestoneHook = Field(default_factory=MilestoneHook)
    comments: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    body: str = ""


class ProjectHook(Schema):
    id: int = 0
    name: str = ""
    path: str = ""
    full_name: str = ""
    owner: UserHook = Field(default_factory=UserHook)
    private: bool = False
    html_url: str = ""
    url: str = ""
    description: str = ""
    fork: bool = False
    pushed_at: str = ""
    created_at: str = ""
    updated_at: str = ""
    ssh_url: str = ""
    git_url: str = ""
    clone_url: str = ""
    svn_url: str = ""
    git_http_url: str = ""
    git_ssh_url: str = ""
    git_svn_url: str = ""
    homepage: str = ""
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
    language: str = ""
    has_issues: bool = False
    has_wiki: bool = False
    has_pages: bool = False
    license: str = ""
    open_issues_count: int = 0
    default_branch: str = ""
    namespace: str = ""
    name_with_namespace: str = ""
    path_with_namespace: str = ""


class RepoInfo(Schema):
    project: ProjectHook = Field(default_factory=ProjectHook)
    repository: ProjectHook = Field(default_factory=ProjectHook)


class BranchHook(Schema):
    label: str = ""
    ref: str = ""
    sha: str = ""
    user: Optional[UserHook] = None
    repo: Optional[ProjectHook] = None


class PullRequestHook(Schema):
    id: int = 0
    number: int = 0
    state: str = ""
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    title: str = ""
    body: str = ""
    stale_labels: list[LabelHook] = Field(default_factory=list)
    labels: list[LabelHook] = Field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""
    closed_at: str = ""
    merged_at: str = ""
    merge_commit_sha: str = ""
    merge_reference_name: str = ""
    user: UserHook = Field(default_factory=UserHook)
    assignee: UserHook = Field(default_factory=UserHook)
    assignees: list[UserHook] = Field(default_factory=list)
    tester: list[UserHook] = Field(default_factory=list)
    testers: list[UserHook] = Field(default_factory=list)
    need_test: bool = False
    need_review: bool = False
    milestone: MilestoneHook = Field(default_factory=MilestoneHook)
    head: BranchHook = Field(default_factory=BranchHook)
    base: BranchHook = Field(default_factory=BranchHook)
    merged: bool = False
    mergeable: bool = False
    merge_status: str = ""
    updated_by: UserHook = Field(default_factory=UserHook)
    comments: int = 0
    commits: int = 0
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0


# Event payloads
#
# Gitee echoes the hook name and its password in every delivery body.

class PushEventPayload(Payload):
    ref: str = ""
    before: str = ""
    after: str = ""
    total_commits_count: int = 0
    commits_more_than_ten: bool = False
    created: bool = False
    deleted: bool = False
    compare: str = ""
    commits: list[CommitHook] = Field(default_factory=list)
    head_commit: CommitHook = Field(default_factory=CommitHook)
    repository: ProjectHook = Field(default_factory=ProjectHook)
    project: ProjectHook = Field(default_factory=ProjectHook)
    user_id: int = 0
    user_name: str = ""
    user: UserHook = Field(default_factory=UserHook)
    pusher: UserHook = Field(default_factory=UserHook)
    sender: UserHook = Field(default_factory=UserHook)
    enterprise: EnterpriseHook = Field(default_factory=EnterpriseHook)
    hook_name: str = ""
    password: str = ""


class TagEventPayload(Payload):
    action: str = ""


class IssueEventPayload(Payload):
    action: str = ""
    issue: IssueHook = Field(default_factory=IssueHook)
    repository: ProjectHook = Field(default_factory=ProjectHook)
    project: ProjectHook = Field(default_factory=ProjectHook)
    sender: UserHook = Field(default_factory=UserHook)
    target_user: UserHook = Field(default_factory=UserHook)
    user: UserHook = Field(default_factory=UserHook)
    assignee: UserHook = Field(default_factory=UserHook)
    updated_by: UserHook = Field(default_factory=UserHook)
    iid: str = ""
    title: str = ""
    description: str = ""
    state: str = ""
    milestone: str = ""
    url: str = ""
    enterprise: EnterpriseHook = Field(default_factory=EnterpriseHook)
    hook_name: str = ""
    password: str = ""


class CommentEventPayload(Payload):
    action: str = ""
    comment: NoteHook = Field(default_factory=NoteHook)
    repository: ProjectHook = Field(default_factory=ProjectHook)
    project: ProjectHook = Field(default_factory=ProjectHook)
    author: UserHook = Field(default_factory=UserHook)
    sender: UserHook = Field(default_factory=UserHook)
    url: str = ""
    note: str = ""
    noteable_type: str = ""
    noteable_id: int = 0
    title: str = ""
    per_iid: str = ""
    short_commit_id: str = ""
    enterprise: EnterpriseHook = Field(default_factory=EnterpriseHook)
    pull_request: PullRequestHook = Field(default_factory=PullRequestHook)
    issue: IssueHook = Field(default_factory=IssueHook)
    hook_name: str = ""
    password: str = ""


class MergeRequestEventPayload(Payload):
    action: str = ""
    action_desc: str = ""
    pull_request: PullRequestHook = Field(default_factory=PullRequestHook)
    number: int = 0
    iid: int = 0
    title: str = ""
    body: str = ""
    state: str = ""
    merge_status: str = ""
    merge_commit_sha: str = ""
    url: str = ""
    source_branch: str = ""
    source_repo: RepoInfo = Field(default_factory=RepoInfo)
    target_branch: str = ""
    target_repo: RepoInfo = Field(default_factory=RepoInfo)
    project: ProjectHook = Field(default_factory=ProjectHook)
    repository: ProjectHook = Field(default_factory=ProjectHook)
    author: UserHook = Field(default_factory=UserHook)
    updated_by: UserHook = Field(default_factory=UserHook)
    sender: UserHook = Field(default_factory=UserHook)
    target_user: UserHook = Field(default_factory=UserHook)
    enterprise: EnterpriseHook = Field(default_factory=EnterpriseHook)
    hook_name: str = ""
    password: str = ""


_PAYLOADS = {
    Event.PUSH: PushEventPayload,
    Event.TAG_PUSH: TagEventPayload,
    Event.ISSUE: IssueEventPayload,
    Event.NOTE: CommentEventPayload,
    Event.MERGE_REQUEST: MergeRequestEventPayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
