"""
Gitea webhook parser.
"""
import hashlib

from ..logger import logger
from ..webhook.errors import HMACVerificationFailedError, SecretNotMatchError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser, secure_compare
from ..webhook.request import WebhookRequest
from .models import PAYLOADS, GiteaPayload


class GiteaWebhookParser(WebhookParser):
    """Parser for Gitea webhooks.

    Gitea authenticates a delivery by echoing the hook secret in the body,
    so the body is decoded before the secret can be checked; a mismatching
    payload is attached to the ``SecretNotMatchError``. Newer Gitea releases
    also sign the body in ``X-Gitea-Signature``; when that header is present
    the signature is verified instead, before decoding.
    """

    provider = GitProvider.GITEA
    event_header = "X-Gitea-Event"
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)
        tag = self.event_tag(request)
        self.check_subscribed(tag, events)

        body = request.read_body()
        signature = request.header("X-Gitea-Signature")
        if self._config.secret and signature:
            if not self.verify_signature(body, signature, hashlib.sha256):
                raise HMACVerificationFailedError()
            return self.decode(tag, body)

        payload = self.decode(tag, body)
        if self._config.secret:
            self._check_body_secret(payload)
        return payload

    def _check_body_secret(self, payload: Payload) -> None:
        secret = payload.secret if isinstance(payload, GiteaPayload) else ""
        if not secure_compare(secret, self._config.secret):
            logger.debug(f"Gitea {payload.hook_event!r} delivery carries a mismatched secret")
            raise SecretNotMatchError(payload=payload)
