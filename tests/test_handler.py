"""
Tests for the FastAPI webhook handler.
"""
import hashlib

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from gitwebhooks.bitbucket import BitbucketWebhookParser
from gitwebhooks.github import Event, GitHubWebhookParser
from gitwebhooks.github.models import PushPayload
from gitwebhooks.webhook import GitProvider, WebhookHandler
from gitwebhooks.webhook.options import hook_uuid, secret

SECRET = "handler-secret"


class TestWebhookHandler:
    """Test cases for WebhookHandler."""

    @pytest.fixture
    def handler(self):
        handler = WebhookHandler()
        handler.register(GitHubWebhookParser(secret(SECRET)), Event.PUSH)
        return handler

    @pytest.fixture
    def client(self, handler):
        app = FastAPI()

        @app.post("/webhook/{provider}")
        async def receive(provider: GitProvider, request: Request):
            return await handler.handle_webhook(request, provider)

        return TestClient(app)

    @pytest.fixture
    def signed_headers(self, sign, github_push_body):
        return {
            "X-GitHub-Event": "push",
            "X-Hub-Signature-256": "sha256=" + sign(SECRET, github_push_body, hashlib.sha256),
        }

    def test_accepted_delivery(self, handler, client, signed_headers, github_push_body):
        """A valid delivery is answered 200 and passed to callbacks."""
        received = []

        async def on_event(provider, payload):
            received.append((provider, payload))

        handler.on_event(on_event)

        response = client.post("/webhook/github", content=github_push_body, headers=signed_headers)

        assert response.status_code == 200
        assert response.json() == {"status": "success", "provider": "github", "event": "push"}
        assert len(received) == 1
        provider, payload = received[0]
        assert provider == GitProvider.GITHUB
        assert isinstance(payload, PushPayload)
        assert payload.ref == "refs/heads/changes"

    def test_bad_signature(self, client, github_push_body):
        """Authentication failures map to the error's status code."""
        headers = {"X-GitHub-Event": "push", "X-Hub-Signature-256": "sha256=00"}

        response = client.post("/webhook/github", content=github_push_body, headers=headers)

        assert response.status_code == 403
        assert response.json()["detail"] == "HMAC verification failed"

    def test_unsubscribed_event_ignored(self, client, sign, github_push_body):
        """EventNotFound is answered 200 with an ignored status."""
        headers = {
            "X-GitHub-Event": "issues",
            "X-Hub-Signature-256": "sha256=" + sign(SECRET, github_push_body),
        }

        response = client.post("/webhook/github", content=github_push_body, headers=headers)

        assert response.status_code == 200
        assert response.json()["status"] == "ignored"

    def test_malformed_body(self, client, sign):
        """A signed but malformed body is a bad request."""
        body = b"{not json"
        headers = {"X-GitHub-Event": "push", "X-Hub-Signature-256": "sha256=" + sign(SECRET, body)}

        response = client.post("/webhook/github", content=body, headers=headers)

        assert response.status_code == 400

    def test_provider_not_registered(self, client, github_push_body):
        """Providers without a registered parser are not found."""
        response = client.post("/webhook/gitlab", content=github_push_body, headers={"X-Gitlab-Event": "Push Hook"})

        assert response.status_code == 404

    def test_callback_failure_does_not_fail_delivery(self, handler, client, signed_headers, github_push_body):
        """A raising callback is logged and later callbacks still run."""
        calls = []

        async def broken(provider, payload):
            raise RuntimeError("downstream unavailable")

        async def working(provider, payload):
            calls.append(payload.hook_event)

        handler.on_event(broken)
        handler.on_event(working)

        response = client.post("/webhook/github", content=github_push_body, headers=signed_headers)

        assert response.status_code == 200
        assert calls == ["push"]

    def test_register_defaults_to_all_events(self):
        """Registering without events subscribes to everything the parser supports."""
        handler = WebhookHandler()
        handler.register(BitbucketWebhookParser(hook_uuid("abc")))

        assert handler.providers == [GitProvider.BITBUCKET]

    def test_uuid_failure_status(self):
        """Missing and mismatching UUIDs map to 400 and 403."""
        handler = WebhookHandler()
        handler.register(BitbucketWebhookParser(hook_uuid("abc")))
        app = FastAPI()

        @app.post("/hook")
        async def receive(request: Request):
            return await handler.handle_webhook(request, GitProvider.BITBUCKET)

        client = TestClient(app)

        missing = client.post("/hook", content=b"{}", headers={"X-Event-Key": "repo:push"})
        wrong = client.post("/hook", content=b"{}", headers={"X-Event-Key": "repo:push", "X-Hook-UUID": "nope"})

        assert missing.status_code == 400
        assert wrong.status_code == 403
