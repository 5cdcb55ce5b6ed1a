"""
GitHub webhook parser.
"""
import hashlib

from ..webhook.errors import HMACVerificationFailedError, MissingSignatureHeaderError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser
from ..webhook.request import WebhookRequest
from .models import PAYLOADS


class GitHubWebhookParser(WebhookParser):
    """Parser for GitHub webhooks.

    With a secret configured, ``X-Hub-Signature-256`` is verified when the
    delivery carries it, otherwise the legacy SHA-1 ``X-Hub-Signature``.
    The signature is checked before the subscription list is consulted.
    """

    provider = GitProvider.GITHUB
    event_header = "X-GitHub-Event"
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)
        tag = self.event_tag(request)

        body = None
        if self._config.secret:
            body = request.read_body()
            self._check_signature(request, body)

        self.check_subscribed(tag, events)
        if body is None:
            body = request.read_body()
        return self.decode(tag, body)

    def _check_signature(self, request: WebhookRequest, body: bytes) -> None:
        signature = request.header("X-Hub-Signature-256")
        if signature:
            digestmod, prefix = hashlib.sha256, len("sha256=")
        else:
            signature = request.header("X-Hub-Signature")
            if not signature:
                raise MissingSignatureHeaderError()
            digestmod, prefix = hashlib.sha1, len("sha1=")

        if not self.verify_signature(body, signature[prefix:], digestmod):
            raise HMACVerificationFailedError()
