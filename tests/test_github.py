"""
Tests for the GitHub webhook parser.
"""
import hashlib
import json

import pytest

from gitwebhooks.github import Event, GitHubWebhookParser
from gitwebhooks.github.models import PingPayload, PushPayload
from gitwebhooks.webhook.errors import (
    EventNotFoundError,
    EventNotSpecifiedToParseError,
    HMACVerificationFailedError,
    InvalidHTTPMethodError,
    MissingEventHeaderError,
    MissingSignatureHeaderError,
    ParsingPayloadError,
    UnknownEventError,
)
from gitwebhooks.webhook.options import secret

SECRET = "IsWishesWereHorsesWedAllBeEatingSteak!"


class TestGitHubWebhookParser:
    """Test cases for GitHubWebhookParser."""

    @pytest.fixture
    def parser(self):
        return GitHubWebhookParser(secret(SECRET))

    @pytest.fixture
    def signed_headers(self, sign, github_push_body):
        def _headers(event="push"):
            return {
                "X-GitHub-Event": event,
                "X-Hub-Signature": "sha1=" + sign(SECRET, github_push_body, hashlib.sha1),
            }
        return _headers

    def test_push_with_sha1_signature(self, parser, make_request, signed_headers, github_push_body):
        """A correctly signed push decodes into PushPayload."""
        request = make_request(signed_headers(), github_push_body)

        payload = parser.parse(request, Event.PUSH)

        assert isinstance(payload, PushPayload)
        assert payload.hook_event == "push"
        assert payload.ref == "refs/heads/changes"
        assert payload.head_commit.id == "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c"
        assert payload.commits[0].modified == ["README.md"]
        assert payload.repository.created_at == 1430869212
        assert request.body.was_closed

    def test_sha256_signature_preferred(self, parser, make_request, sign, github_push_body):
        """X-Hub-Signature-256 is used when present, even with a bad SHA-1 header."""
        headers = {
            "X-GitHub-Event": "push",
            "X-Hub-Signature": "sha1=0000",
            "X-Hub-Signature-256": "sha256=" + sign(SECRET, github_push_body),
        }

        payload = parser.parse(make_request(headers, github_push_body), "push")

        assert isinstance(payload, PushPayload)

    def test_bad_sha256_signature(self, parser, make_request, sign, github_push_body):
        """A mismatching SHA-256 signature is rejected."""
        headers = {
            "X-GitHub-Event": "push",
            "X-Hub-Signature-256": "sha256=" + sign("other", github_push_body),
        }

        with pytest.raises(HMACVerificationFailedError):
            parser.parse(make_request(headers, github_push_body), Event.PUSH)

    def test_missing_signature(self, parser, make_request, github_push_body):
        """With a secret configured, a delivery without signature is rejected."""
        request = make_request({"X-GitHub-Event": "push"}, github_push_body)

        with pytest.raises(MissingSignatureHeaderError) as exc_info:
            parser.parse(request, Event.PUSH)

        assert exc_info.value.status_code == 403
        assert request.body.was_closed

    def test_signature_checked_before_subscription(self, parser, make_request, github_push_body):
        """A forged delivery for an unsubscribed event still fails authentication."""
        headers = {"X-GitHub-Event": "push", "X-Hub-Signature": "sha1=deadbeef"}

        with pytest.raises(HMACVerificationFailedError):
            parser.parse(make_request(headers, github_push_body), Event.PULL_REQUEST)

    def test_unsubscribed_event(self, parser, make_request, signed_headers, github_push_body):
        """A valid delivery for an unsubscribed event is EventNotFound."""
        request = make_request(signed_headers(), github_push_body)

        with pytest.raises(EventNotFoundError) as exc_info:
            parser.parse(request, Event.PULL_REQUEST, Event.ISSUES)

        assert exc_info.value.status_code == 200
        assert request.body.was_closed
        assert request.body.drained

    def test_no_secret_skips_verification(self, make_request, github_push_body):
        """Without a secret no signature header is required."""
        parser = GitHubWebhookParser()

        payload = parser.parse(make_request({"X-GitHub-Event": "push"}, github_push_body), "push")

        assert payload.pusher.name == "baxterthehacker"

    def test_unsubscribed_event_without_secret_leaves_body_unparsed(self, make_request):
        """Without a secret, an unsubscribed event is filtered before the body is read."""
        request = make_request({"X-GitHub-Event": "push"}, b"not json")

        with pytest.raises(EventNotFoundError):
            GitHubWebhookParser().parse(request, Event.ISSUES)

        assert request.body.was_closed
        assert request.body.drained

    def test_missing_event_header(self, parser, make_request, github_push_body):
        """Missing X-GitHub-Event header."""
        with pytest.raises(MissingEventHeaderError) as exc_info:
            parser.parse(make_request({}, github_push_body), Event.PUSH)

        assert exc_info.value.message == "missing X-GitHub-Event Header"

    def test_invalid_method(self, parser, make_request, signed_headers, github_push_body):
        """Only POST is accepted."""
        request = make_request(signed_headers(), github_push_body, method="GET")

        with pytest.raises(InvalidHTTPMethodError):
            parser.parse(request, Event.PUSH)

        assert request.body.was_closed

    def test_no_events(self, parser, make_request, signed_headers, github_push_body):
        """Parsing with an empty subscription list is a caller error."""
        with pytest.raises(EventNotSpecifiedToParseError):
            parser.parse(make_request(signed_headers(), github_push_body))

    def test_empty_body(self, make_request):
        """An empty body cannot be decoded."""
        with pytest.raises(ParsingPayloadError):
            GitHubWebhookParser().parse(make_request({"X-GitHub-Event": "push"}, b""), Event.PUSH)

    def test_malformed_json(self, make_request):
        """A body that is not JSON is a parsing error."""
        with pytest.raises(ParsingPayloadError):
            GitHubWebhookParser().parse(make_request({"X-GitHub-Event": "push"}, b"{nope"), Event.PUSH)

    def test_unknown_subscribed_event(self, make_request):
        """A subscribed tag without schema is UnknownEventError."""
        request = make_request({"X-GitHub-Event": "sponsorship"}, {"action": "created"})

        with pytest.raises(UnknownEventError) as exc_info:
            GitHubWebhookParser().parse(request, "sponsorship")

        assert "sponsorship" in exc_info.value.message

    def test_ping(self, make_request):
        """Ping deliveries decode into PingPayload."""
        body = {"zen": "Design for failure.", "hook_id": 42, "hook": {"type": "Repository", "events": ["push"]}}

        payload = GitHubWebhookParser().parse(make_request({"X-GitHub-Event": "ping"}, body), Event.PING)

        assert isinstance(payload, PingPayload)
        assert payload.hook_id == 42
        assert payload.hook.events == ["push"]

    def test_round_trip(self, make_request, github_push_body):
        """Re-serialising a decoded payload and parsing it again yields an equal value."""
        parser = GitHubWebhookParser()
        first = parser.parse(make_request({"X-GitHub-Event": "push"}, github_push_body), Event.PUSH)

        encoded = first.model_dump_json(by_alias=True).encode()
        second = parser.parse(make_request({"X-GitHub-Event": "push"}, encoded), Event.PUSH)

        assert second == first
        assert json.loads(encoded)["ref"] == "refs/heads/changes"
