"""
Gogs webhook parser.
"""
import hashlib

from ..logger import logger
from ..webhook.errors import HMACVerificationFailedError, MissingSignatureHeaderError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser
from ..webhook.request import WebhookRequest
from .models import PAYLOADS


class GogsWebhookParser(WebhookParser):
    """Parser for Gogs webhooks.

    With a secret configured every delivery must carry ``X-Gogs-Signature``,
    the hex HMAC-SHA256 of the body.
    """

    provider = GitProvider.GOGS
    event_header = "X-Gogs-Event"
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)
        tag = self.event_tag(request)
        self.check_subscribed(tag, events)

        body = request.read_body()
        if self._config.secret:
            signature = request.header("X-Gogs-Signature")
            if not signature:
                raise MissingSignatureHeaderError("missing X-Gogs-Signature Header")
            if not self.verify_signature(body, signature, hashlib.sha256):
                logger.debug(f"Gogs {tag!r} delivery failed HMAC verification")
                raise HMACVerificationFailedError()

        return self.decode(tag, body)
