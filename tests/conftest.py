"""
Shared fixtures for webhook parser tests.
"""
import base64
import hashlib
import hmac
import io
import json

import pytest

from gitwebhooks.webhook.request import WebhookRequest


class TrackingBody(io.BytesIO):
    """In-memory body that records how much was read and whether it was closed."""

    def __init__(self, data: bytes = b""):
        super().__init__(data)
        self.size = len(data)
        self.drained = False
        self.was_closed = False

    def close(self):
        if self.closed:
            return
        self.drained = self.tell() == self.size
        self.was_closed = True
        super().close()


def hmac_hex(secret: str, body: bytes, digestmod=hashlib.sha256) -> str:
    return hmac.new(secret.encode(), body, digestmod).hexdigest()


@pytest.fixture
def sign():
    """Hex HMAC of a body keyed by a secret."""
    return hmac_hex


@pytest.fixture
def make_request():
    """Build a WebhookRequest whose body is a TrackingBody.

    ``body`` may be bytes or any JSON-serialisable value.
    """
    def _make(headers=None, body=b"", method="POST"):
        if not isinstance(body, bytes):
            body = json.dumps(body).encode()
        return WebhookRequest(method, headers or {}, TrackingBody(body))
    return _make


@pytest.fixture
def basic_auth_header():
    def _header(username: str, password: str) -> str:
        token = base64.b64encode(f"{username}:{password}".encode()).decode()
        return f"Basic {token}"
    return _header


@pytest.fixture
def github_push_body() -> bytes:
    """A trimmed GitHub push delivery."""
    payload = {
        "ref": "refs/heads/changes",
        "before": "9049f1265b7d61be4a8904a9a27120d2064dab3b",
        "after": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
        "created": False,
        "deleted": False,
        "forced": False,
        "base_ref": None,
        "compare": "https://github.com/baxterthehacker/public-repo/compare/9049f1265b7d...0d1a26e67d8f",
        "commits": [
            {
                "id": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
                "tree_id": "f9d2a07e9488b91af2641b26b9407fe22a451433",
                "distinct": True,
                "message": "Update README.md",
                "timestamp": "2015-05-05T19:40:15-04:00",
                "url": "https://github.com/baxterthehacker/public-repo/commit/0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
                "author": {
                    "name": "baxterthehacker",
                    "email": "baxterthehacker@users.noreply.github.com",
                    "username": "baxterthehacker",
                },
                "committer": {
                    "name": "baxterthehacker",
                    "email": "baxterthehacker@users.noreply.github.com",
                    "username": "baxterthehacker",
                },
                "added": [],
                "removed": [],
                "modified": ["README.md"],
            }
        ],
        "head_commit": {
            "id": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
            "tree_id": "f9d2a07e9488b91af2641b26b9407fe22a451433",
            "distinct": True,
            "message": "Update README.md",
            "timestamp": "2015-05-05T19:40:15-04:00",
            "url": "https://github.com/baxterthehacker/public-repo/commit/0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
            "author": {"name": "baxterthehacker", "email": "baxterthehacker@users.noreply.github.com"},
            "committer": {"name": "baxterthehacker", "email": "baxterthehacker@users.noreply.github.com"},
            "added": [],
            "removed": [],
            "modified": ["README.md"],
        },
        "repository": {
            "id": 35129377,
            "name": "public-repo",
            "full_name": "baxterthehacker/public-repo",
            "owner": {
                "name": "baxterthehacker",
                "email": "baxterthehacker@users.noreply.github.com",
            },
            "private": False,
            "html_url": "https://github.com/baxterthehacker/public-repo",
            "created_at": 1430869212,
            "updated_at": "2015-05-05T23:40:12Z",
            "pushed_at": 1430869217,
            "default_branch": "master",
            "master_branch": "master",
            "stargazers": 0,
            "license": None,
        },
        "pusher": {"name": "baxterthehacker", "email": "baxterthehacker@users.noreply.github.com"},
        "sender": {"login": "baxterthehacker", "id": 6752317, "type": "User", "site_admin": False},
    }
    return json.dumps(payload).encode()
