"""
GitHub webhook event catalog.
"""
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import Field

from ..webhook.models import Payload, Schema
from ..webhook.times import ZERO_TIME


class Event(str, Enum):
    """GitHub event tags, as sent in ``X-GitHub-Event``."""
    CHECK_RUN = "check_run"
    CHECK_SUITE = "check_suite"
    COMMIT_COMMENT = "commit_comment"
    CREATE = "create"
    DELETE = "delete"
    DEPLOYMENT = "deployment"
    DEPLOYMENT_STATUS = "deployment_status"
    FORK = "fork"
    GOLLUM = "gollum"
    INSTALLATION = "installation"
    INSTALLATION_REPOSITORIES = "installation_repositories"
    INTEGRATION_INSTALLATION = "integration_installation"
    INTEGRATION_INSTALLATION_REPOSITORIES = "integration_installation_repositories"
    ISSUE_COMMENT = "issue_comment"
    ISSUES = "issues"
    LABEL = "label"
    MEMBER = "member"
    MEMBERSHIP = "membership"
    META = "meta"
    MILESTONE = "milestone"
    ORGANIZATION = "organization"
    ORG_BLOCK = "org_block"
    PAGE_BUILD = "page_build"
    PING = "ping"
    PROJECT_CARD = "project_card"
    PROJECT_COLUMN = "project_column"
    PROJECT = "project"
    PUBLIC = "public"
    PULL_REQUEST = "pull_request"
    PULL_REQUEST_REVIEW = "pull_request_review"
    PULL_REQUEST_REVIEW_COMMENT = "pull_request_review_comment"
    PUSH = "push"
    RELEASE = "release"
    REPOSITORY = "repository"
    REPOSITORY_VULNERABILITY_ALERT = "repository_vulnerability_alert"
    SECURITY_ADVISORY = "security_advisory"
    STATUS = "status"
    TEAM = "team"
    TEAM_ADD = "team_add"
    WATCH = "watch"


# Shared records

class User(Schema):
    login: str = ""
    id: int = 0
    node_id: str = ""
    avatar_url: str = ""
    gravatar_id: str = ""
    url: str = ""
    html_url: str = ""
    followers_url: str = ""
    following_url: str = ""
    gists_url: str = ""
    starred_url: str = ""
    subscriptions_url: str = ""
    organizations_url: str = ""
    repos_url: str = ""
    events_url: str = ""
    received_events_url: str = ""
    type: str = ""
    site_admin: bool = False


class PushRepositoryOwner(User):
    """Repository owner inside a push payload, which also carries name and email."""
    email: str = ""
    name: str = ""


class Organization(Schema):
    login: str = ""
    id: int = 0
    node_id: str = ""
    url: str = ""
    repos_url: str = ""
    events_url: str = ""
    hooks_url: str = ""
    issues_url: str = ""
    members_url: str = ""
    public_members_url: str = ""
    avatar_url: str = ""
    description: str = ""


class Team(Schema):
    name: str = ""
    id: int = 0
    node_id: str = ""
    slug: str = ""
    description: str = ""
    privacy: str = ""
    url: str = ""
    html_url: str = ""
    members_url: str = ""
    repositories_url: str = ""
    permission: str = ""


class Milestone(Schema):
    url: str = ""
    html_url: str = ""
    labels_url: str = ""
    id: int = 0
    node_id: str = ""
    number: int = 0
    state: str = ""
    title: str = ""
    description: str = ""
    creator: User = Field(default_factory=User)
    open_issues: int = 0
    closed_issues: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    closed_at: Optional[datetime] = None
    due_on: datetime = ZERO_TIME


class Asset(Schema):
    url: str = ""
    browser_download_url: str = ""
    id: int = 0
    node_id: str = ""
    name: str = ""
    label: str = ""
    state: str = ""
    content_type: str = ""
    size: int = 0
    download_count: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    uploader: User = Field(default_factory=User)


class Parent(Schema):
    url: str = ""
    sha: str = ""


class Label(Schema):
    id: int = 0
    node_id: str = ""
    url: str = ""
    name: str = ""
    color: str = ""
    default: bool = False


class RepositoryURLs(Schema):
    """The API and clone URLs every repository representation carries."""
    html_url: str = ""
    url: str = ""
    forks_url: str = ""
    keys_url: str = ""
    collaborators_url: str = ""
    teams_url: str = ""
    hooks_url: str = ""
    issue_events_url: str = ""
    events_url: str = ""
    assignees_url: str = ""
    branches_url: str = ""
    tags_url: str = ""
    blobs_url: str = ""
    git_tags_url: str = ""
    git_refs_url: str = ""
    trees_url: str = ""
    statuses_url: str = ""
    languages_url: str = ""
    stargazers_url: str = ""
    contributors_url: str = ""
    subscribers_url: str = ""
    subscription_url: str = ""
    commits_url: str = ""
    git_commits_url: str = ""
    comments_url: str = ""
    issue_comment_url: str = ""
    contents_url: str = ""
    compare_url: str = ""
    merges_url: str = ""
    archive_url: str = ""
    downloads_url: str = ""
    issues_url: str = ""
    pulls_url: str = ""
    milestones_url: str = ""
    notifications_url: str = ""
    labels_url: str = ""
    releases_url: str = ""
    git_url: str = ""
    ssh_url: str = ""
    clone_url: str = ""
    svn_url: str = ""
    deployments_url: str = ""


class RepositoryStats(Schema):
    id: int = 0
    node_id: str = ""
    name: str = ""
    full_name: str = ""
    private: bool = False
    archived: bool = False
    disabled: bool = False
    description: Optional[str] = None
    fork: bool = False
    license: Optional[Any] = None
    homepage: Optional[str] = None
    size: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    language: Optional[str] = None
    has_issues: bool = False
    has_downloads: bool = False
    has_wiki: bool = False
    has_pages: bool = False
    has_projects: bool = False
    forks_count: int = 0
    mirror_url: Optional[str] = None
    open_issues_count: int = 0
    forks: int = 0
    open_issues: int = 0
    watchers: int = 0
    default_branch: str = ""


class Repository(RepositoryURLs, RepositoryStats):
    owner: User = Field(default_factory=User)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    pushed_at: datetime = ZERO_TIME


class PushRepository(RepositoryURLs, RepositoryStats):
    """Repository of a push payload; ``created_at`` and ``pushed_at`` are epoch seconds."""
    owner: PushRepositoryOwner = Field(default_factory=PushRepositoryOwner)
    created_at: int = 0
    updated_at: datetime = ZERO_TIME
    pushed_at: int = 0
    master_branch: str = ""
    stargazers: int = 0


class Installation(Schema):
    id: int = 0
    node_id: str = ""


class AppPermissions(Schema):
    administration: str = ""
    checks: str = ""
    contents: str = ""
    deployments: str = ""
    issues: str = ""
    members: str = ""
    metadata: str = ""
    organization_administration: str = ""
    organization_hooks: str = ""
    organization_plan: str = ""
    organization_projects: str = ""
    organization_user_blocking: str = ""
    pages: str = ""
    pull_requests: str = ""
    repository_hooks: str = ""
    repository_projects: str = ""
    statuses: str = ""
    team_discussions: str = ""
    vulnerability_alerts: str = ""


class App(Schema):
    id: int = 0
    node_id: str = ""
    owner: User = Field(default_factory=User)
    name: str = ""
    description: str = ""
    external_url: str = ""
    html_url: str = ""
    created_at: str = ""
    updated_at: str = ""
    permissions: AppPermissions = Field(default_factory=AppPermissions)
    events: list[str] = Field(default_factory=list)


class Issue(Schema):
    url: str = ""
    repository_url: str = ""
    labels_url: str = ""
    comments_url: str = ""
    events_url: str = ""
    html_url: str = ""
    id: int = 0
    node_id: str = ""
    number: int = 0
    title: str = ""
    user: User = Field(default_factory=User)
    labels: list[Label] = Field(default_factory=list)
    author_association: str = ""
    state: str = ""
    locked: bool = False
    assignee: Optional[User] = None
    assignees: list[User] = Field(default_factory=list)
    milestone: Optional[Milestone] = None
    comments: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    closed_at: Optional[datetime] = None
    body: str = ""


class CommitUser(Schema):
    name: str = ""
    email: str = ""
    username: str = ""


class Commit(Schema):
    """A commit listed in a push payload; ``timestamp`` is kept verbatim."""
    id: str = ""
    tree_id: str = ""
    distinct: bool = False
    message: str = ""
    timestamp: str = ""
    url: str = ""
    author: CommitUser = Field(default_factory=CommitUser)
    committer: CommitUser = Field(default_factory=CommitUser)
    added: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    modified: list[str] = Field(default_factory=list)


class Deployment(Schema):
    url: str = ""
    id: int = 0
    node_id: str = ""
    sha: str = ""
    ref: str = ""
    task: str = ""
    payload: Any = Field(default_factory=dict)
    environment: str = ""
    original_environment: str = ""
    description: Optional[str] = None
    creator: User = Field(default_factory=User)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    statuses_url: str = ""
    repository_url: str = ""


class InstallationObj(Schema):
    """Full installation record of the installation events."""
    id: int = 0
    account: User = Field(default_factory=User)
    repository_selection: str = ""
    access_tokens_url: str = ""
    repositories_url: str = ""
    html_url: str = ""
    app_id: int = 0
    target_id: int = 0
    target_type: str = ""
    permissions: AppPermissions = Field(default_factory=AppPermissions)
    events: list[str] = Field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
    single_file_name: Optional[str] = None


class Link(Schema):
    href: str = ""


class RefRepo(Schema):
    id: int = 0
    url: str = ""
    name: str = ""


class CheckRef(Schema):
    ref: str = ""
    sha: str = ""
    repo: RefRepo = Field(default_factory=RefRepo)


class CheckPullRequest(Schema):
    """Pull request reference inside check run and check suite payloads."""
    url: str = ""
    id: int = 0
    number: int = 0
    head: CheckRef = Field(default_factory=CheckRef)
    base: CheckRef = Field(default_factory=CheckRef)


class PullRequestBranch(Schema):
    label: str = ""
    ref: str = ""
    sha: str = ""
    user: User = Field(default_factory=User)
    repo: Repository = Field(default_factory=Repository)


class PullRequestLinks(Schema):
    self_link: Link = Field(default_factory=Link, alias="self")
    html: Link = Field(default_factory=Link)
    issue: Link = Field(default_factory=Link)
    comments: Link = Field(default_factory=Link)
    review_comments: Link = Field(default_factory=Link)
    review_comment: Link = Field(default_factory=Link)
    commits: Link = Field(default_factory=Link)
    statuses: Link = Field(default_factory=Link)


class ReviewPullRequest(Schema):
    """Pull request object of review and review comment payloads."""
    url: str = ""
    id: int = 0
    node_id: str = ""
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    issue_url: str = ""
    number: int = 0
    state: str = ""
    locked: bool = False
    title: str = ""
    author_association: str = ""
    user: User = Field(default_factory=User)
    body: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    closed_at: Optional[datetime] = None
    merged_at: Optional[datetime] = None
    merge_commit_sha: str = ""
    assignee: Optional[User] = None
    assignees: list[User] = Field(default_factory=list)
    requested_reviewers: list[User] = Field(default_factory=list)
    requested_teams: list[Team] = Field(default_factory=list)
    milestone: Optional[Milestone] = None
    labels: list[Label] = Field(default_factory=list)
    commits_url: str = ""
    review_comments_url: str = ""
    review_comment_url: str = ""
    comments_url: str = ""
    statuses_url: str = ""
    head: PullRequestBranch = Field(default_factory=PullRequestBranch)
    base: PullRequestBranch = Field(default_factory=PullRequestBranch)
    links: PullRequestLinks = Field(default_factory=PullRequestLinks, alias="_links")


class PullRequest(ReviewPullRequest):
    merge_commit_sha: Optional[str] = None
    draft: bool = False
    maintainer_can_modify: bool = False
    merged: bool = False
    mergeable: Optional[bool] = None
    rebaseable: Optional[bool] = None
    mergeable_state: str = ""
    merged_by: Optional[User] = None
    comments: int = 0
    review_comments: int = 0
    commits: int = 0
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0


class Person(Schema):
    name: str = ""
    email: str = ""


class HookConfig(Schema):
    content_type: str = ""
    insecure_ssl: str = ""
    secret: str = ""
    url: str = ""


class Hook(Schema):
    type: str = ""
    id: int = 0
    node_id: str = ""
    name: str = ""
    active: bool = False
    events: list[str] = Field(default_factory=list)
    app_id: int = 0
    config: HookConfig = Field(default_factory=HookConfig)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


# Event payloads

class RepositoryEventPayload(Payload):
    """Fields common to most repository-scoped events."""
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)
    installation: Installation = Field(default_factory=Installation)


class CheckSuite(Schema):
    id: int = 0
    node_id: str = ""
    head_branch: str = ""
    head_sha: str = ""
    status: str = ""
    conclusion: Optional[str] = None
    url: str = ""
    before: str = ""
    after: str = ""
    pull_requests: list[CheckPullRequest] = Field(default_factory=list)
    app: App = Field(default_factory=App)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class CheckRunOutput(Schema):
    title: Optional[str] = None
    summary: Optional[str] = None
    text: Optional[str] = None
    annotations_count: int = 0
    annotations_url: str = ""


class CheckRun(Schema):
    id: int = 0
    node_id: str = ""
    name: str = ""
    head_sha: str = ""
    status: str = ""
    conclusion: Optional[str] = None
    url: str = ""
    html_url: str = ""
    started_at: datetime = ZERO_TIME
    completed_at: Optional[datetime] = None
    details_url: str = ""
    external_id: str = ""
    output: CheckRunOutput = Field(default_factory=CheckRunOutput)
    check_suite: CheckSuite = Field(default_factory=CheckSuite)
    app: App = Field(default_factory=App)
    pull_requests: list[CheckPullRequest] = Field(default_factory=list)


class CheckRunPayload(RepositoryEventPayload):
    action: str = ""
    check_run: CheckRun = Field(default_factory=CheckRun)


class CheckSuiteHeadCommit(Schema):
    id: str = ""
    tree_id: str = ""
    message: str = ""
    timestamp: datetime = ZERO_TIME
    author: Person = Field(default_factory=Person)
    committer: Person = Field(default_factory=Person)


class CheckSuiteDetail(CheckSuite):
    latest_check_runs_count: int = 0
    check_runs_url: str = ""
    head_commit: CheckSuiteHeadCommit = Field(default_factory=CheckSuiteHeadCommit)


class CheckSuitePayload(RepositoryEventPayload):
    action: str = ""
    check_suite: CheckSuiteDetail = Field(default_factory=CheckSuiteDetail)


class CommitComment(Schema):
    url: str = ""
    html_url: str = ""
    id: int = 0
    node_id: str = ""
    user: User = Field(default_factory=User)
    position: Optional[int] = None
    line: Optional[int] = None
    path: Optional[str] = None
    commit_id: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    body: str = ""
    author_association: str = ""


class CommitCommentPayload(RepositoryEventPayload):
    action: str = ""
    comment: CommitComment = Field(default_factory=CommitComment)


class CreatePayload(RepositoryEventPayload):
    ref: str = ""
    ref_type: str = ""
    master_branch: str = ""
    description: Optional[str] = None
    pusher_type: str = ""


class DeletePayload(RepositoryEventPayload):
    ref: str = ""
    ref_type: str = ""
    pusher_type: str = ""


class DeploymentPayload(RepositoryEventPayload):
    deployment: Deployment = Field(default_factory=Deployment)


class DeploymentStatus(Schema):
    url: str = ""
    id: int = 0
    node_id: str = ""
    state: str = ""
    creator: User = Field(default_factory=User)
    description: Optional[str] = None
    environment: str = ""
    target_url: Optional[str] = None
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    deployment_url: str = ""
    repository_url: str = ""


class DeploymentStatusPayload(RepositoryEventPayload):
    deployment_status: DeploymentStatus = Field(default_factory=DeploymentStatus)
    deployment: Deployment = Field(default_factory=Deployment)


class ForkPayload(RepositoryEventPayload):
    forkee: Repository = Field(default_factory=Repository)


class WikiPage(Schema):
    page_name: str = ""
    title: str = ""
    summary: Optional[str] = None
    action: str = ""
    sha: str = ""
    html_url: str = ""


class GollumPayload(RepositoryEventPayload):
    pages: list[WikiPage] = Field(default_factory=list)


class InstallationRepository(Schema):
    id: int = 0
    node_id: str = ""
    name: str = ""
    full_name: str = ""
    private: bool = False


class InstallationPayload(Payload):
    """Payload of both ``installation`` and ``integration_installation``."""
    action: str = ""
    installation: InstallationObj = Field(default_factory=InstallationObj)
    repositories: list[InstallationRepository] = Field(default_factory=list)
    sender: User = Field(default_factory=User)


class InstallationRepositoriesPayload(Payload):
    action: str = ""
    repository_selection: str = ""
    installation: InstallationObj = Field(default_factory=InstallationObj)
    repositories_added: list[InstallationRepository] = Field(default_factory=list)
    repositories_removed: list[InstallationRepository] = Field(default_factory=list)
    sender: User = Field(default_factory=User)


class IssueComment(Schema):
    url: str = ""
    html_url: str = ""
    issue_url: str = ""
    id: int = 0
    node_id: str = ""
    user: User = Field(default_factory=User)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    body: str = ""
    author_association: str = ""


class IssueCommentPayload(RepositoryEventPayload):
    action: str = ""
    issue: Issue = Field(default_factory=Issue)
    comment: IssueComment = Field(default_factory=IssueComment)


class IssuesPayload(RepositoryEventPayload):
    action: str = ""
    issue: Issue = Field(default_factory=Issue)
    changes: Optional[Any] = None


class LabelPayload(RepositoryEventPayload):
    action: str = ""
    label: Label = Field(default_factory=Label)


class MemberPayload(RepositoryEventPayload):
    action: str = ""
    member: User = Field(default_factory=User)


class MembershipPayload(Payload):
    action: str = ""
    scope: str = ""
    member: User = Field(default_factory=User)
    sender: User = Field(default_factory=User)
    team: Team = Field(default_factory=Team)
    organization: Organization = Field(default_factory=Organization)
    installation: Installation = Field(default_factory=Installation)


class MetaPayload(RepositoryEventPayload):
    hook_id: int = 0
    action: str = ""
    hook: Hook = Field(default_factory=Hook)


class MilestonePayload(RepositoryEventPayload):
    action: str = ""
    milestone: Milestone = Field(default_factory=Milestone)


class OrganizationMembership(Schema):
    url: str = ""
    state: str = ""
    role: str = ""
    organization_url: str = ""
    user: User = Field(default_factory=User)


class OrganizationPayload(Payload):
    action: str = ""
    membership: OrganizationMembership = Field(default_factory=OrganizationMembership)
    organization: Organization = Field(default_factory=Organization)
    sender: User = Field(default_factory=User)
    installation: Installation = Field(default_factory=Installation)


class OrgBlockPayload(Payload):
    action: str = ""
    blocked_user: User = Field(default_factory=User)
    organization: Organization = Field(default_factory=Organization)
    sender: User = Field(default_factory=User)
    installation: Installation = Field(default_factory=Installation)


class PageBuildError(Schema):
    message: Optional[str] = None


class PageBuild(Schema):
    url: str = ""
    status: str = ""
    error: PageBuildError = Field(default_factory=PageBuildError)
    pusher: User = Field(default_factory=User)
    commit: str = ""
    duration: int = 0
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class PageBuildPayload(RepositoryEventPayload):
    id: int = 0
    build: PageBuild = Field(default_factory=PageBuild)


class PingPayload(Payload):
    hook_id: int = 0
    hook: Hook = Field(default_factory=Hook)
    repository: Repository = Field(default_factory=Repository)
    sender: User = Field(default_factory=User)


class ProjectCard(Schema):
    url: str = ""
    column_url: str = ""
    column_id: int = 0
    id: int = 0
    node_id: str = ""
    note: Optional[str] = None
    archived: bool = False
    project_url: str = ""
    creator: User = Field(default_factory=User)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class ProjectCardPayload(RepositoryEventPayload):
    action: str = ""
    project_card: ProjectCard = Field(default_factory=ProjectCard)


class ProjectColumn(Schema):
    url: str = ""
    project_url: str = ""
    cards_url: str = ""
    id: int = 0
    node_id: str = ""
    name: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class ProjectColumnPayload(RepositoryEventPayload):
    action: str = ""
    project_column: ProjectColumn = Field(default_factory=ProjectColumn)


class Project(Schema):
    owner_url: str = ""
    url: str = ""
    columns_url: str = ""
    id: int = 0
    node_id: str = ""
    name: str = ""
    body: str = ""
    number: int = 0
    state: str = ""
    html_url: str = ""
    creator: User = Field(default_factory=User)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class ProjectPayload(RepositoryEventPayload):
    action: str = ""
    project: Project = Field(default_factory=Project)


class PublicPayload(RepositoryEventPayload):
    pass


class PullRequestPayload(RepositoryEventPayload):
    action: str = ""
    number: int = 0
    pull_request: PullRequest = Field(default_factory=PullRequest)


class ReviewLinks(Schema):
    html: Link = Field(default_factory=Link)
    pull_request: Link = Field(default_factory=Link)


class Review(Schema):
    id: int = 0
    node_id: str = ""
    commit_id: str = ""
    author_association: str = ""
    user: User = Field(default_factory=User)
    body: Optional[str] = None
    submitted_at: datetime = ZERO_TIME
    state: str = ""
    html_url: str = ""
    pull_request_url: str = ""
    links: ReviewLinks = Field(default_factory=ReviewLinks, alias="_links")


class PullRequestReviewPayload(RepositoryEventPayload):
    action: str = ""
    review: Review = Field(default_factory=Review)
    pull_request: ReviewPullRequest = Field(default_factory=ReviewPullRequest)


class ReviewCommentLinks(Schema):
    self_link: Link = Field(default_factory=Link, alias="self")
    html: Link = Field(default_factory=Link)
    pull_request: Link = Field(default_factory=Link)


class ReviewComment(Schema):
    url: str = ""
    id: int = 0
    node_id: str = ""
    diff_hunk: str = ""
    path: str = ""
    position: int = 0
    original_position: int = 0
    commit_id: str = ""
    original_commit_id: str = ""
    user: User = Field(default_factory=User)
    body: str = ""
    author_association: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    html_url: str = ""
    pull_request_url: str = ""
    links: ReviewCommentLinks = Field(default_factory=ReviewCommentLinks, alias="_links")
    pull_request_review_id: int = 0


class PullRequestReviewCommentPayload(RepositoryEventPayload):
    action: str = ""
    comment: ReviewComment = Field(default_factory=ReviewComment)
    pull_request: ReviewPullRequest = Field(default_factory=ReviewPullRequest)


class PushPayload(Payload):
    ref: str = ""
    before: str = ""
    after: str = ""
    created: bool = False
    deleted: bool = False
    forced: bool = False
    base_ref: Optional[str] = None
    compare: str = ""
    commits: list[Commit] = Field(default_factory=list)
    head_commit: Optional[Commit] = None
    repository: PushRepository = Field(default_factory=PushRepository)
    pusher: Person = Field(default_factory=Person)
    sender: User = Field(default_factory=User)
    installation: Installation = Field(default_factory=Installation)


class Release(Schema):
    url: str = ""
    assets_url: str = ""
    upload_url: str = ""
    html_url: str = ""
    id: int = 0
    node_id: str = ""
    tag_name: str = ""
    target_commitish: str = ""
    name: Optional[str] = None
    draft: bool = False
    author: User = Field(default_factory=User)
    prerelease: bool = False
    created_at: datetime = ZERO_TIME
    published_at: datetime = ZERO_TIME
    assets: list[Asset] = Field(default_factory=list)
    tarball_url: str = ""
    zipball_url: str = ""
    body: Optional[str] = None


class ReleasePayload(RepositoryEventPayload):
    action: str = ""
    release: Release = Field(default_factory=Release)


class RepositoryPayload(RepositoryEventPayload):
    action: str = ""


class VulnerabilityAlert(Schema):
    id: int = 0
    affected_range: str = ""
    affected_package_name: str = ""
    external_reference: str = ""
    external_identifier: str = ""
    fixed_in: str = ""


class RepositoryVulnerabilityAlertPayload(RepositoryEventPayload):
    action: str = ""
    alert: VulnerabilityAlert = Field(default_factory=VulnerabilityAlert)


class AdvisoryIdentifier(Schema):
    value: str = ""
    type: str = ""


class AdvisoryReference(Schema):
    url: str = ""


class AdvisoryPackage(Schema):
    ecosystem: str = ""
    name: str = ""


class PatchedVersion(Schema):
    identifier: str = ""


class Vulnerability(Schema):
    package: AdvisoryPackage = Field(default_factory=AdvisoryPackage)
    severity: str = ""
    vulnerable_version_range: str = ""
    first_patched_version: Optional[PatchedVersion] = None


class SecurityAdvisory(Schema):
    ghsa_id: str = ""
    summary: str = ""
    description: str = ""
    severity: str = ""
    identifiers: list[AdvisoryIdentifier] = Field(default_factory=list)
    references: list[AdvisoryReference] = Field(default_factory=list)
    published_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME
    withdrawn_at: Optional[datetime] = None
    vulnerabilities: list[Vulnerability] = Field(default_factory=list)


class SecurityAdvisoryPayload(Payload):
    action: str = ""
    security_advisory: SecurityAdvisory = Field(default_factory=SecurityAdvisory)
    installation: Installation = Field(default_factory=Installation)


class GitActor(Schema):
    name: str = ""
    email: str = ""
    date: datetime = ZERO_TIME


class Tree(Schema):
    sha: str = ""
    url: str = ""


class Verification(Schema):
    payload: str = ""
    signature: str = ""
    reason: str = ""
    verified: bool = False


class GitCommit(Schema):
    author: GitActor = Field(default_factory=GitActor)
    committer: GitActor = Field(default_factory=GitActor)
    message: str = ""
    tree: Tree = Field(default_factory=Tree)
    url: str = ""
    comment_count: int = 0
    verification: Verification = Field(default_factory=Verification)


class StatusCommit(Schema):
    sha: str = ""
    node_id: str = ""
    commit: GitCommit = Field(default_factory=GitCommit)
    url: str = ""
    html_url: str = ""
    comments_url: str = ""
    author: User = Field(default_factory=User)
    committer: User = Field(default_factory=User)
    parents: list[Parent] = Field(default_factory=list)


class Branch(Schema):
    name: str = ""
    protected: bool = False
    commit: Tree = Field(default_factory=Tree)


class StatusPayload(RepositoryEventPayload):
    id: int = 0
    sha: str = ""
    name: str = ""
    target_url: Optional[str] = None
    context: str = ""
    description: Optional[str] = None
    state: str = ""
    commit: StatusCommit = Field(default_factory=StatusCommit)
    branches: list[Branch] = Field(default_factory=list)
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class TeamPermissions(Schema):
    admin: bool = False
    pull: bool = False
    push: bool = False


class TeamRepository(Repository):
    """Repository of a team event, with the team's permissions on it."""
    permissions: TeamPermissions = Field(default_factory=TeamPermissions)


class TeamPayload(Payload):
    action: str = ""
    team: Team = Field(default_factory=Team)
    organization: Organization = Field(default_factory=Organization)
    repository: TeamRepository = Field(default_factory=TeamRepository)
    sender: User = Field(default_factory=User)
    installation: Installation = Field(default_factory=Installation)


class TeamAddPayload(RepositoryEventPayload):
    team: Team = Field(default_factory=Team)
    organization: Organization = Field(default_factory=Organization)


class WatchPayload(RepositoryEventPayload):
    action: str = ""


_PAYLOADS = {
    Event.CHECK_RUN: CheckRunPayload,
    Event.CHECK_SUITE: CheckSuitePayload,
    Event.COMMIT_COMMENT: CommitCommentPayload,
    Event.CREATE: CreatePayload,
    Event.DELETE: DeletePayload,
    Event.DEPLOYMENT: DeploymentPayload,
    Event.DEPLOYMENT_STATUS: DeploymentStatusPayload,
    Event.FORK: ForkPayload,
    Event.GOLLUM: GollumPayload,
    Event.INSTALLATION: InstallationPayload,
    Event.INTEGRATION_INSTALLATION: InstallationPayload,
    Event.INSTALLATION_REPOSITORIES: InstallationRepositoriesPayload,
    Event.INTEGRATION_INSTALLATION_REPOSITORIES: InstallationRepositoriesPayload,
    Event.ISSUE_COMMENT: IssueCommentPayload,
    Event.ISSUES: IssuesPayload,
    Event.LABEL: LabelPayload,
    Event.MEMBER: MemberPayload,
    Event.MEMBERSHIP: MembershipPayload,
    Event.META: MetaPayload,
    Event.MILESTONE: MilestonePayload,
    Event.ORGANIZATION: OrganizationPayload,
    Event.ORG_BLOCK: OrgBlockPayload,
    Event.PAGE_BUILD: PageBuildPayload,
    Event.PING: PingPayload,
    Event.PROJECT_CARD: ProjectCardPayload,
    Event.PROJECT_COLUMN: ProjectColumnPayload,
    Event.PROJECT: ProjectPayload,
    Event.PUBLIC: PublicPayload,
    Event.PULL_REQUEST: PullRequestPayload,
    Event.PULL_REQUEST_REVIEW: PullRequestReviewPayload,
    Event.PULL_REQUEST_REVIEW_COMMENT: PullRequestReviewCommentPayload,
    Event.PUSH: PushPayload,
    Event.RELEASE: ReleasePayload,
    Event.REPOSITORY: RepositoryPayload,
    Event.REPOSITORY_VULNERABILITY_ALERT: RepositoryVulnerabilityAlertPayload,
    Event.SECURITY_ADVISORY: SecurityAdvisoryPayload,
    Event.STATUS: StatusPayload,
    Event.TEAM: TeamPayload,
    Event.TEAM_ADD: TeamAddPayload,
    Event.WATCH: WatchPayload,
}

PAYLOADS: dict[str, type[Payload]] = {event.value: model for event, model in _PAYLOADS.items()}
