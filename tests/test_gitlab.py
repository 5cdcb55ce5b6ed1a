"""
Tests for the GitLab webhook parser.
"""
from datetime import datetime, timezone

import pytest

from gitwebhooks.gitlab import Event, GitLabWebhookParser
from gitwebhooks.gitlab.models import (
    BuildEventPayload,
    JobEventPayload,
    MergeRequestEventPayload,
    ProjectCreatedEventPayload,
    PushEventPayload,
)
from gitwebhooks.webhook.errors import (
    EventNotFoundError,
    MissingEventHeaderError,
    ParsingPayloadError,
    TokenVerificationFailedError,
)
from gitwebhooks.webhook.options import secret

TOKEN = "sampleToken!"

PUSH_BODY = {
    "object_kind": "push",
    "before": "95790bf891e76fee5e1747ab589903a6a1f80f22",
    "after": "da1560886d4f094c3e6c9ef40349f7d38b5d27d7",
    "ref": "refs/heads/master",
    "checkout_sha": "da1560886d4f094c3e6c9ef40349f7d38b5d27d7",
    "user_id": 4,
    "user_name": "John Smith",
    "user_email": "john@example.com",
    "project_id": 15,
    "project": {"id": 15, "name": "Diaspora", "path_with_namespace": "mike/diaspora"},
    "commits": [
        {
            "id": "b6568db1bc1dcd7f8b4d5a946b0b91f9dacd7327",
            "message": "Update Catalan translation to e38cb41.",
            "timestamp": "2011-12-12T14:27:31+02:00",
            "author": {"name": "Jordi Mallach", "email": "jordi@softcatala.org"},
            "added": ["CHANGELOG"],
        },
        {
            "id": "da1560886d4f094c3e6c9ef40349f7d38b5d27d7",
            "message": "fixed readme",
            "timestamp": "2012-01-03 23:36:29 UTC",
            "author": {"name": "GitLab dev user", "email": "gitlabdev@dv6700.(none)"},
        },
    ],
    "total_commits_count": 2,
}


class TestGitLabWebhookParser:
    """Test cases for GitLabWebhookParser."""

    @pytest.fixture
    def parser(self):
        return GitLabWebhookParser(secret(TOKEN))

    @pytest.fixture
    def headers(self):
        def _headers(event, token=TOKEN):
            return {"X-Gitlab-Event": event, "X-Gitlab-Token": token}
        return _headers

    def test_push(self, parser, make_request, headers):
        """Push Hook decodes with mixed timestamp layouts."""
        request = make_request(headers("Push Hook"), PUSH_BODY)

        payload = parser.parse(request, Event.PUSH)

        assert isinstance(payload, PushEventPayload)
        assert payload.hook_event == "Push Hook"
        assert payload.user_email == "john@example.com"
        assert [commit.id[:7] for commit in payload.commits] == ["b6568db", "da15608"]
        assert payload.commits[1].timestamp == datetime(2012, 1, 3, 23, 36, 29, tzinfo=timezone.utc)
        assert payload.commits[0].timestamp.utcoffset().total_seconds() == 7200
        assert request.body.was_closed

    def test_bad_token(self, parser, make_request, headers):
        """A wrong X-Gitlab-Token is rejected."""
        request = make_request(headers("Push Hook", token="wrong"), PUSH_BODY)

        with pytest.raises(TokenVerificationFailedError):
            parser.parse(request, Event.PUSH)

        assert request.body.was_closed

    def test_token_checked_before_event_header(self, parser, make_request):
        """Authentication fails before the missing event header is noticed."""
        with pytest.raises(TokenVerificationFailedError):
            parser.parse(make_request({"X-Gitlab-Token": "wrong"}, PUSH_BODY), Event.PUSH)

    def test_missing_event_header(self, parser, make_request):
        """Missing X-Gitlab-Event header."""
        with pytest.raises(MissingEventHeaderError):
            parser.parse(make_request({"X-Gitlab-Token": TOKEN}, PUSH_BODY), Event.PUSH)

    def test_unsubscribed_event(self, parser, make_request, headers):
        """Unsubscribed events are EventNotFound without decoding."""
        request = make_request(headers("Push Hook"), b"not json")

        with pytest.raises(EventNotFoundError):
            parser.parse(request, Event.MERGE_REQUEST)

        assert request.body.drained

    def test_merge_request(self, make_request):
        """Merge Request Hook decodes into MergeRequestEventPayload."""
        body = {
            "object_kind": "merge_request",
            "user": {"name": "Administrator", "username": "root"},
            "project": {"id": 1, "name": "Gitlab Test"},
            "object_attributes": {"id": 99, "iid": 1, "title": "MS-Viewport", "created_at": "2013-12-03T17:23:34Z"},
        }
        request = make_request({"X-Gitlab-Event": "Merge Request Hook"}, body)

        payload = GitLabWebhookParser().parse(request, Event.MERGE_REQUEST)

        assert isinstance(payload, MergeRequestEventPayload)
        assert payload.user.username == "root"
        assert payload.object_attributes.iid == 1

    def test_job_hook_dispatched_as_build(self, make_request):
        """Job Hook bodies describing a build decode as Build Hook."""
        body = {"object_kind": "build", "build_id": 1977, "build_name": "test", "build_status": "created"}
        request = make_request({"X-Gitlab-Event": "Job Hook"}, body)

        payload = GitLabWebhookParser().parse(request, Event.JOB, Event.BUILD)

        assert isinstance(payload, BuildEventPayload)
        assert not isinstance(payload, JobEventPayload)
        assert payload.hook_event == "Build Hook"
        assert payload.build_id == 1977

    def test_job_hook_build_not_subscribed(self, make_request):
        """The re-dispatched Build Hook must be subscribed too."""
        body = {"object_kind": "build", "build_id": 1977}

        with pytest.raises(EventNotFoundError):
            GitLabWebhookParser().parse(make_request({"X-Gitlab-Event": "Job Hook"}, body), Event.JOB)

    def test_system_hook_push(self, make_request):
        """System Hook push bodies decode as Push Hook."""
        request = make_request({"X-Gitlab-Event": "System Hook"}, PUSH_BODY)

        payload = GitLabWebhookParser().parse(request, Event.SYSTEM, Event.PUSH)

        assert isinstance(payload, PushEventPayload)
        assert payload.hook_event == "Push Hook"

    def test_system_hook_project_create(self, make_request):
        """System events are routed by event_name."""
        body = {
            "created_at": "2012-07-21T07:30:54Z",
            "updated_at": "2012-07-21T07:38:22Z",
            "event_name": "project_create",
            "name": "StoreCloud",
            "owner_email": "johnsmith@gmail.com",
            "path_with_namespace": "jsmith/storecloud",
            "project_id": 74,
            "project_visibility": "private",
        }
        request = make_request({"X-Gitlab-Event": "System Hook"}, body)

        payload = GitLabWebhookParser().parse(request, Event.SYSTEM)

        assert isinstance(payload, ProjectCreatedEventPayload)
        assert payload.hook_event == "System Hook"
        assert payload.project_id == 74
        assert payload.created_at.year == 2012

    def test_system_hook_unknown_event_name(self, make_request):
        """An unrecognised system event is a parsing error."""
        request = make_request({"X-Gitlab-Event": "System Hook"}, {"event_name": "repository_update"})

        with pytest.raises(ParsingPayloadError):
            GitLabWebhookParser().parse(request, Event.SYSTEM)

    def test_supported_events_include_system_hook(self):
        """System Hook is subscribable even though it has no single schema."""
        assert "System Hook" in GitLabWebhookParser.supported_events()
