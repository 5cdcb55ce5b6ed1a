"""
Bitbucket Server webhook parser.
"""
import hashlib

from ..webhook.errors import HMACVerificationFailedError, MissingSignatureHeaderError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser
from ..webhook.request import WebhookRequest
from .models import PAYLOADS, DiagnosticsPingPayload, Event


class BitbucketServerWebhookParser(WebhookParser):
    """Parser for Bitbucket Server webhooks.

    Deliveries are signed with HMAC-SHA256 in ``X-Hub-Signature``. A
    ``diagnostics:ping`` yields an empty ``DiagnosticsPingPayload``; when a
    secret is configured the ping must still be correctly signed.
    """

    provider = GitProvider.BITBUCKET_SERVER
    event_header = "X-Event-Key"
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)
        tag = self.event_tag(request)
        self.check_subscribed(tag, events)

        is_ping = tag == Event.DIAGNOSTICS_PING.value
        if is_ping and not self._config.secret:
            return DiagnosticsPingPayload().with_event(tag)

        body = request.read_body()
        if self._config.secret:
            self._check_signature(request, body)

        if is_ping:
            return DiagnosticsPingPayload().with_event(tag)
        return self.decode(tag, body)

    def _check_signature(self, request: WebhookRequest, body: bytes) -> None:
        signature = request.header("X-Hub-Signature")
        if not signature:
            raise MissingSignatureHeaderError()
        if not self.verify_signature(body, signature[len("sha256="):], hashlib.sha256):
            raise HMACVerificationFailedError()
