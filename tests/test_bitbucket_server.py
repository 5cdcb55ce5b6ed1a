"""
Tests for the Bitbucket Server webhook parser.
"""
import json
from datetime import timedelta

import pytest

from gitwebhooks.bitbucket_server import Event, BitbucketServerWebhookParser
from gitwebhooks.bitbucket_server.models import (
    DiagnosticsPingPayload,
    PullRequestFromReferenceUpdatedPayload,
    PullRequestOpenedPayload,
    RepositoryReferenceChangedPayload,
)
from gitwebhooks.webhook.errors import (
    EventNotFoundError,
    HMACVerificationFailedError,
    MissingSignatureHeaderError,
    ParsingPayloadError,
)
from gitwebhooks.webhook.options import secret

SECRET = "secret"

REFS_CHANGED_BODY = {
    "eventKey": "repo:refs_changed",
    "date": "2017-09-19T09:58:11+1000",
    "actor": {"name": "admin", "emailAddress": "admin@example.com", "id": 1, "displayName": "Administrator"},
    "repository": {
        "slug": "repository",
        "id": 84,
        "name": "repository",
        "scmId": "git",
        "project": {"key": "PROJ", "id": 84, "name": "project", "public": False},
        "origin": {"slug": "upstream", "id": 12},
    },
    "changes": [
        {
            "ref": {"id": "refs/heads/master", "displayId": "master", "type": "BRANCH"},
            "refId": "refs/heads/master",
            "fromHash": "ecddabb624f6f5ba43816f5926e580a5f680a932",
            "toHash": "178864a7d521b6f5e720b386b2c2b0ef8563e0dc",
            "type": "UPDATE",
        }
    ],
}


class TestBitbucketServerWebhookParser:
    """Test cases for BitbucketServerWebhookParser."""

    @pytest.fixture
    def parser(self):
        return BitbucketServerWebhookParser(secret(SECRET))

    @pytest.fixture
    def signed(self, sign):
        def _signed(event, body):
            raw = body if isinstance(body, bytes) else json.dumps(body).encode()
            headers = {"X-Event-Key": event, "X-Hub-Signature": "sha256=" + sign(SECRET, raw)}
            return headers, raw
        return _signed

    def test_refs_changed(self, parser, make_request, signed):
        """repo:refs_changed decodes with camelCase keys and the colon-less date zone."""
        headers, body = signed("repo:refs_changed", REFS_CHANGED_BODY)
        request = make_request(headers, body)

        payload = parser.parse(request, Event.REPOSITORY_REFERENCE_CHANGED)

        assert isinstance(payload, RepositoryReferenceChangedPayload)
        assert payload.event_key == "repo:refs_changed"
        assert payload.date.utcoffset() == timedelta(hours=10)
        assert payload.actor.email_address == "admin@example.com"
        assert payload.repository.scm_id == "git"
        assert payload.repository.project.public is False
        assert payload.repository.origin.slug == "upstream"
        assert payload.changes[0].ref.display_id == "master"
        assert payload.changes[0].to_hash.startswith("178864a7")
        assert request.body.was_closed

    def test_date_serialised_without_colon(self, parser, make_request, signed):
        """The event date is written back in its wire layout."""
        headers, body = signed("repo:refs_changed", REFS_CHANGED_BODY)
        payload = parser.parse(make_request(headers, body), Event.REPOSITORY_REFERENCE_CHANGED)

        dumped = json.loads(payload.model_dump_json(by_alias=True))

        assert dumped["date"] == "2017-09-19T09:58:11+1000"
        assert dumped["eventKey"] == "repo:refs_changed"

    def test_ping_short_circuit(self, parser, make_request, signed):
        """A signed diagnostics:ping yields an empty ping payload."""
        headers, body = signed("diagnostics:ping", b"{}")

        payload = parser.parse(make_request(headers, body), Event.DIAGNOSTICS_PING)

        assert isinstance(payload, DiagnosticsPingPayload)
        assert payload.hook_event == "diagnostics:ping"

    def test_ping_with_bad_signature(self, parser, make_request):
        """With a secret configured, ping deliveries are verified too."""
        headers = {"X-Event-Key": "diagnostics:ping", "X-Hub-Signature": "sha256=0000"}

        with pytest.raises(HMACVerificationFailedError):
            parser.parse(make_request(headers, b"{}"), Event.DIAGNOSTICS_PING)

    def test_ping_without_secret(self, make_request):
        """Without a secret the ping body is not even read."""
        request = make_request({"X-Event-Key": "diagnostics:ping"}, b"")

        payload = BitbucketServerWebhookParser().parse(request, Event.DIAGNOSTICS_PING)

        assert isinstance(payload, DiagnosticsPingPayload)
        assert request.body.was_closed

    def test_missing_signature(self, parser, make_request):
        """Missing X-Hub-Signature with a secret configured."""
        request = make_request({"X-Event-Key": "repo:refs_changed"}, REFS_CHANGED_BODY)

        with pytest.raises(MissingSignatureHeaderError):
            parser.parse(request, Event.REPOSITORY_REFERENCE_CHANGED)

    def test_bad_signature(self, parser, make_request, sign):
        """A signature made with another secret is rejected."""
        body = json.dumps(REFS_CHANGED_BODY).encode()
        headers = {"X-Event-Key": "repo:refs_changed", "X-Hub-Signature": "sha256=" + sign("other", body)}

        with pytest.raises(HMACVerificationFailedError):
            parser.parse(make_request(headers, body), Event.REPOSITORY_REFERENCE_CHANGED)

    def test_unsubscribed_event(self, parser, make_request, signed):
        """Unsubscribed events are EventNotFound."""
        headers, body = signed("repo:refs_changed", REFS_CHANGED_BODY)

        with pytest.raises(EventNotFoundError):
            parser.parse(make_request(headers, body), Event.PULL_REQUEST_OPENED)

    def test_pull_request_opened(self, parser, make_request, signed):
        """pr:opened keeps epoch millisecond entity dates."""
        body = {
            "eventKey": "pr:opened",
            "date": "2017-09-19T09:58:11+0000",
            "pullRequest": {
                "id": 1,
                "title": "a new file added",
                "createdDate": 1505779091796,
                "fromRef": {"id": "refs/heads/a-branch", "displayId": "a-branch", "latestCommit": "ef8755f06ee4"},
                "author": {"user": {"name": "admin"}, "role": "AUTHOR", "approved": False},
            },
        }
        headers, raw = signed("pr:opened", body)

        payload = parser.parse(make_request(headers, raw), Event.PULL_REQUEST_OPENED)

        assert isinstance(payload, PullRequestOpenedPayload)
        assert payload.pull_request.created_date == 1505779091796
        assert payload.pull_request.from_ref.latest_commit == "ef8755f06ee4"
        assert payload.pull_request.author.role == "AUTHOR"

    def test_from_ref_updated(self, parser, make_request, signed):
        """pr:from_ref_updated carries the previous source hash."""
        body = {"eventKey": "pr:from_ref_updated", "date": "2020-02-20T14:49:41+1100", "previousFromHash": "abc"}
        headers, raw = signed("pr:from_ref_updated", body)

        payload = parser.parse(make_request(headers, raw), Event.PULL_REQUEST_FROM_REFERENCE_UPDATED)

        assert isinstance(payload, PullRequestFromReferenceUpdatedPayload)
        assert payload.previous_from_hash == "abc"

    def test_bad_date(self, make_request):
        """A date in another layout is a parsing error."""
        body = dict(REFS_CHANGED_BODY, date="2017-09-19T09:58:11+10:00")
        request = make_request({"X-Event-Key": "repo:refs_changed"}, body)

        with pytest.raises(ParsingPayloadError):
            BitbucketServerWebhookParser().parse(request, Event.REPOSITORY_REFERENCE_CHANGED)
