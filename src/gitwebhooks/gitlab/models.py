"""
GitLab webhook event catalog.

Timestamps use ``GitLabTime``, which accepts every layout GitLab has been
seen to emit.
"""
from enum import Enum

from pydantic import Field

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME, GitLabTime


class Event(str, Enum):
    """GitLab event tags, as sent in ``X-Gitlab-Event``."""
    PUSH = "Push Hook"
    TAG_PUSH = "Tag Push Hook"
    ISSUE = "Issue Hook"
    CONFIDENTIAL_ISSUE = "Confidential Issue Hook"
    NOTE = "Note Hook"
    CONFIDENTIAL_NOTE = "Confidential Note Hook"
    MERGE_REQUEST = "Merge Request Hook"
    WIKI_PAGE = "Wiki Page Hook"
    PIPELINE = "Pipeline Hook"
    BUILD = "Build Hook"
    JOB = "Job Hook"
    DEPLOYMENT = "Deployment Hook"
    SYSTEM = "System Hook"


# Records

class User(Schema):
    id: int = 0
    name: str = ""
    username: str = ""
    avatar_url: str = ""
    email: str = ""


class Assignee(User):
    pass


class Author(Schema):
    name: str = ""
    email: str = ""


class ProjectInfo(Schema):
    name: str = ""
    description: str = ""
    web_url: str = ""
    avatar_url: str = ""
    git_ssh_url: str = ""
    git_http_url: str = ""
    namespace: str = ""
    visibility_level: int = 0
    path_with_namespace: str = ""
    default_branch: str = ""
    homepage: str = ""
    url: str = ""
    ssh_url: str = ""
    http_url: str = ""


class Project(ProjectInfo):
    id: int = 0


class Source(ProjectInfo):
    pass


class Target(ProjectInfo):
    pass


class Repository(Schema):
    name: str = ""
    url: str = ""
    description: str = ""
    homepage: str = ""
    git_ssh_url: str = ""
    git_http_url: str = ""
    visibility_level: int = 0


class Issue(Schema):
    id: int = 0
    title: str = ""
    assignee_id: int = 0
    author_id: int = 0
    project_id: int = 0
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    position: int = 0
    branch_name: str = ""
    description: str = ""
    milestone_id: int = 0
    state: str = ""
    iid: int = 0


class Runner(Schema):
    id: int = 0
    description: str = ""
    active: bool = False
    is_shared: bool = False


class ArtifactsFile(Schema):
    filename: str = ""
    size: str = ""


class Build(Schema):
    id: int = 0
    stage: str = ""
    name: str = ""
    status: str = ""
    created_at: GitLabTime = ZERO_TIME
    started_at: GitLabTime = ZERO_TIME
    finished_at: GitLabTime = ZERO_TIME
    failure_reason: str = ""
    when: str = ""
    manual: bool = False
    user: User = Field(default_factory=User)
    runner: Runner = Field(default_factory=Runner)
    artifacts_file: ArtifactsFile = Field(default_factory=ArtifactsFile, alias="artifactsfile")


class Wiki(Schema):
    web_url: str = ""
    git_ssh_url: str = ""
    git_http_url: str = ""
    path_with_namespace: str = ""
    default_branch: str = ""


class Commit(Schema):
    id: str = ""
    message: str = ""
    title: str = ""
    timestamp: GitLabTime = ZERO_TIME
    url: str = ""
    author: Author = Field(default_factory=Author)
    added: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)


class BuildCommit(Schema):
    id: int = 0
    sha: str = ""
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    status: str = ""
    duration: float = 0.0
    started_at: GitLabTime = ZERO_TIME
    finished_at: GitLabTime = ZERO_TIME


class Snippet(Schema):
    id: int = 0
    title: str = ""
    content: str = ""
    author_id: int = 0
    project_id: int = 0
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    file_name: str = ""
    expires_at: GitLabTime = ZERO_TIME
    type: str = ""
    visibility_level: int = 0


class Position(Schema):
    base_sha: str = ""
    start_sha: str = ""
    head_sha: str = ""
    old_path: str = ""
    new_path: str = ""
    position_type: str = ""
    old_line: int = 0
    new_line: int = 0
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0


class StDiff(Schema):
    diff: str = ""
    new_path: str = ""
    old_path: str = ""
    a_mode: str = ""
    b_mode: str = ""
    new_file: bool = False
    renamed_file: bool = False
    deleted_file: bool = False


class LastCommit(Schema):
    id: str = ""
    message: str = ""
    timestamp: GitLabTime = ZERO_TIME
    url: str = ""
    author: Author = Field(default_factory=Author)


class ObjectAttributes(Schema):
    """Attributes of the object an issue, merge request, note or wiki event is about."""
    id: int = 0
    title: str = ""
    assignee_ids: list[int] = Field(default_factory=list)
    assignee_id: int = 0
    author_id: int = 0
    project_id: int = 0
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    updated_by_id: int = 0
    last_edited_at: GitLabTime = ZERO_TIME
    last_edited_by_id: int = 0
    relative_position: int = 0
    position: Position = Field(default_factory=Position)
    branch_name: str = ""
    description: str = ""
    milestone_id: int = 0
    state: str = ""
    state_id: int = 0
    confidential: bool = False
    discussion_locked: bool = False
    due_date: GitLabTime = ZERO_TIME
    time_estimate: int = 0
    total_time_spent: int = 0
    iid: int = 0
    url: str = ""
    action: str = ""
    target_branch: str = ""
    source_branch: str = ""
    source_project_id: int = 0
    target_project_id: int = 0
    st_commits: str = ""
    merge_status: str = ""
    content: str = ""
    format: str = ""
    message: str = ""
    slug: str = ""
    ref: str = ""
    tag: bool = False
    sha: str = ""
    before_sha: str = ""
    status: str = ""
    stages: list[str] = Field(default_factory=list)
    duration: int = 0
    note: str = ""
    noteable_type: str = ""
    attachment: GitLabTime = ZERO_TIME
    line_code: str = ""
    commit_id: str = ""
    noteable_id: int = 0
    system: bool = False
    work_in_progress: bool = False
    st_diffs: list[StDiff] = Field(default_factory=list)
    source: Source = Field(default_factory=Source)
    target: Target = Field(default_factory=Target)
    last_commit: LastCommit = Field(default_factory=LastCommit)
    assignee: Assignee = Field(default_factory=Assignee)


class Variable(Schema):
    key: str = ""
    value: str = ""


class PipelineObjectAttributes(Schema):
    id: int = 0
    ref: str = ""
    tag: bool = False
    sha: str = ""
    before_sha: str = ""
    source: str = ""
    status: str = ""
    stages: list[str] = Field(default_factory=list)
    created_at: GitLabTime = ZERO_TIME
    finished_at: GitLabTime = ZERO_TIME
    duration: int = 0
    variables: list[Variable] = Field(default_factory=list)


class MergeRequest(Schema):
    id: int = 0
    target_branch: str = ""
    source_branch: str = ""
    source_project_id: int = 0
    assignee_id: int = 0
    author_id: int = 0
    title: str = ""
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    milestone_id: int = 0
    state: str = ""
    merge_status: str = ""
    target_project_id: int = 0
    iid: int = 0
    description: str = ""
    position: int = 0
    locked_at: GitLabTime = ZERO_TIME
    source: Source = Field(default_factory=Source)
    target: Target = Field(default_factory=Target)
    last_commit: LastCommit = Field(default_factory=LastCommit)
    work_in_progress: bool = False
    assignee: Assignee = Field(default_factory=Assignee)
    url: str = ""


class Label(Schema):
    id: int = 0
    title: str = ""
    color: str = ""
    project_id: int = 0
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    template: bool = False
    description: str = ""
    type: str = ""
    group_id: int = 0


class LabelChanges(Schema):
    previous: list[Label] = Field(default_factory=list)
    current: list[Label] = Field(default_factory=list)


class Changes(Schema):
    labels: LabelChanges = Field(default_factory=LabelChanges)


# Project and group event payloads

class IssueEventPayload(Payload):
    object_kind: str = ""
    user: User = Field(default_factory=User)
    project: Project = Field(default_factory=Project)
    repository: Repository = Field(default_factory=Repository)
    object_attributes: ObjectAttributes = Field(default_factory=ObjectAttributes)
    assignee: Assignee = Field(default_factory=Assignee)
    assignees: list[Assignee] = Field(default_factory=list)
    changes: Changes = Field(default_factory=Changes)


class ConfidentialIssueEventPayload(IssueEventPayload):
    pass


class MergeRequestEventPayload(Payload):
    object_kind: str = ""
    user: User = Field(default_factory=User)
    object_attributes: ObjectAttributes = Field(default_factory=ObjectAttributes)
    changes: Changes = Field(default_factory=Changes)
    project: Project = Field(default_factory=Project)
    repository: Repository = Field(default_factory=Repository)
    labels: list[Label] = Field(default_factory=list)
    assignees: list[Assignee] = Field(default_factory=list)


class TagEventPayload(Payload):
    object_kind: str = ""
    before: str = ""
    after: str = ""
    ref: str = ""
    checkout_sha: str = ""
    user_id: int = 0
    user_name: str = ""
    user_username: str = ""
    user_avatar: str = ""
    project_id: int = 0
    project: Project = Field(default_factory=Project)
    repository: Repository = Field(default_factory=Repository)
    commits: list[Commit] = Field(default_factory=list)
    total_commits_count: int = 0


class PushEventPayload(TagEventPayload):
    user_email: str = ""


class WikiPageEventPayload(Payload):
    object_kind: str = ""
    user: User = Field(default_factory=User)
    project: Project = Field(default_factory=Project)
    wiki: Wiki = Field(default_factory=Wiki)
    object_attributes: ObjectAttributes = Field(default_factory=ObjectAttributes)


class PipelineEventPayload(Payload):
    object_kind: str = ""
    user: User = Field(default_factory=User)
    project: Project = Field(default_factory=Project)
    commit: Commit = Field(default_factory=Commit)
    object_attributes: PipelineObjectAttributes = Field(default_factory=PipelineObjectAttributes)
    merge_request: MergeRequest = Field(default_factory=MergeRequest)
    builds: list[Build] = Field(default_factory=list)


class CommentEventPayload(Payload):
    object_kind: str = ""
    event_type: str = ""
    user: User = Field(default_factory=User)
    project_id: int = 0
    project: Project = Field(default_factory=Project)
    repository: Repository = Field(default_factory=Repository)
    object_attributes: ObjectAttributes = Field(default_factory=ObjectAttributes)
    merge_request: MergeRequest = Field(default_factory=MergeRequest)
    commit: Commit = Field(default_factory=Commit)
    issue: Issue = Field(default_factory=Issue)
    snippet: Snippet = Field(default_factory=Snippet)


class ConfidentialCommentEventPayload(CommentEventPayload):
    pass


class BuildEventPayload(Payload):
    object_kind: str = ""
    ref: str = ""
    tag: bool = False
    before_sha: str = ""
    sha: str = ""
    build_id: int = 0
    build_name: str = ""
    build_stage: str = ""
    build_status: str = ""
    build_started_at: GitLabTime = ZERO_TIME
    build_finished_at: GitLabTime = ZERO_TIME
    build_queued_duration: float = 0.0
    build_duration: float = 0.0
    build_allow_failure: bool = False
    project_id: int = 0
    project_name: str = ""
    user: User = Field(default_factory=User)
    commit: BuildCommit = Field(default_factory=BuildCommit)
    repository: Repository = Field(default_factory=Repository)
    runner: Runner = Field(default_factory=Runner)


class JobEventPayload(BuildEventPayload):
    build_failure_reason: str = ""
    pipeline_id: int = 0


class DeploymentEventPayload(Payload):
    object_kind: str = ""
    status: str = ""
    status_changed_at: str = ""
    deployment_id: int = 0
    deployable_id: int = 0
    deployable_url: str = ""
    environment: str = ""
    project: Project = Field(default_factory=Project)
    short_sha: str = ""
    user: User = Field(default_factory=User)
    user_url: str = ""
    commit_url: str = ""
    commit_title: str = ""


# System hook payloads

class SystemHookPayload(Payload):
    """Envelope read first to route a system hook delivery."""
    object_kind: str = ""
    event_name: str = ""


class SystemEventPayload(Payload):
    created_at: GitLabTime = ZERO_TIME
    updated_at: GitLabTime = ZERO_TIME
    event_name: str = ""


class ProjectCreatedEventPayload(SystemEventPayload):
    name: str = ""
    owner_email: str = ""
    owner_name: str = ""
    owners: list[Author] = Field(default_factory=list)
    path: str = ""
    path_with_namespace: str = ""
    project_id: int = 0
    project_visibility: str = ""


class ProjectDestroyedEventPayload(ProjectCreatedEventPayload):
    pass


class ProjectUpdatedEventPayload(ProjectCreatedEventPayload):
    pass


class ProjectRenamedEventPayload(ProjectCreatedEventPayload):
    old_path_with_namespace: str = ""


class ProjectTransferredEventPayload(ProjectRenamedEventPayload):
    pass


class TeamMemberAddedEventPayload(SystemEventPayload):
    access_level: str = ""
    project_id: int = 0
    project_name: str = ""
    project_path: str = ""
    project_path_with_namespace: str = ""
    user_email: str = ""
    user_name: str = ""
    user_username: str = ""
    user_id: int = 0
    project_visibility: str = ""


class TeamMemberRemovedEventPayload(TeamMemberAddedEventPayload):
    pass


class TeamMemberUpdatedEventPayload(TeamMemberAddedEventPayload):
    pass


class UserCreatedEventPayload(SystemEventPayload):
    email: str = ""
    name: str = ""
    username: str = ""
    user_id: int = 0


class UserRemovedEventPayload(UserCreatedEventPayload):
    pass


class UserFailedLoginEventPayload(UserCreatedEventPayload):
    state: str = ""


class UserRenamedEventPayload(UserCreatedEventPayload):
    old_username: str = ""


class KeyAddedEventPayload(SystemEventPayload):
    # Key events carry created_at verbatim.
    created_at: str = ""
    username: str = ""
    key: str = ""
    id: int = 0


class KeyRemovedEventPayload(KeyAddedEventPayload):
    pass


class GroupCreatedEventPayload(SystemEventPayload):
    name: str = ""
    path: str = ""
    group_id: int = 0


class GroupRemovedEventPayload(GroupCreatedEventPayload):
    pass


class GroupRenamedEventPayload(GroupCreatedEventPayload):
    full_path: str = ""
    old_path: str = ""
    old_full_path: str = ""


class GroupMemberAddedEventPayload(SystemEventPayload):
    group_access: str = ""
    group_id: int = 0
    group_name: str = ""
    group_path: str = ""
    user_email: str = ""
    user_name: str = ""
    user_username: str = ""
    user_id: int = 0


class GroupMemberRemovedEventPayload(GroupMemberAddedEventPayload):
    pass


class GroupMemberUpdatedEventPayload(GroupMemberAddedEventPayload):
    pass


_PAYLOADS = {
    Event.PUSH: PushEventPayload,
    Event.TAG_PUSH: TagEventPayload,
    Event.ISSUE: IssueEventPayload,
    Event.CONFIDENTIAL_ISSUE: ConfidentialIssueEventPayload,
    Event.NOTE: CommentEventPayload,
    Event.CONFIDENTIAL_NOTE: ConfidentialCommentEventPayload,
    Event.MERGE_REQUEST: MergeRequestEventPayload,
    Event.WIKI_PAGE: WikiPageEventPayload,
    Event.PIPELINE: PipelineEventPayload,
    Event.BUILD: BuildEventPayload,
    Event.JOB: JobEventPayload,
    Event.DEPLOYMENT: DeploymentEventPayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}

# System hook routing: object kinds that mirror a project hook event, and
# the event_name values with their own schema.
SYSTEM_OBJECT_KINDS: dict[str, str] = {
    "push": Event.PUSH.value,
    "tag_push": Event.TAG_PUSH.value,
    "merge_request": Event.MERGE_REQUEST.value,
}

SYSTEM_EVENTS: dict[str, type[Payload]] = {
    "project_create": ProjectCreatedEventPayload,
    "project_destroy": ProjectDestroyedEventPayload,
    "project_rename": ProjectRenamedEventPayload,
    "project_transfer": ProjectTransferredEventPayload,
    "project_update": ProjectUpdatedEventPayload,
    "user_add_to_team": TeamMemberAddedEventPayload,
    "user_remove_from_team": TeamMemberRemovedEventPayload,
    "user_update_for_team": TeamMemberUpdatedEventPayload,
    "user_create": UserCreatedEventPayload,
    "user_destroy": UserRemovedEventPayload,
    "user_failed_login": UserFailedLoginEventPayload,
    "user_rename": UserRenamedEventPayload,
    "key_create": KeyAddedEventPayload,
    "key_destroy": KeyRemovedEventPayload,
    "group_create": GroupCreatedEventPayload,
    "group_destroy": GroupRemovedEventPayload,
    "group_rename": GroupRenamedEventPayload,
    "user_add_to_group": GroupMemberAddedEventPayload,
    "user_remove_from_group": GroupMemberRemovedEventPayload,
    "user_update_for_group": GroupMemberUpdatedEventPayload,
}
