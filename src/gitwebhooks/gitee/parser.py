"""
Gitee webhook parser.
"""
from ..webhook.errors import (
    ContentTypeError,
    MissingTimestampHeaderError,
    TokenVerificationFailedError,
)
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser, secure_compare
from ..webhook.request import WebhookRequest
from .models import PAYLOADS

JSON_CONTENT_TYPE = "application/json"


class GiteeWebhookParser(WebhookParser):
    """Parser for Gitee webhooks.

    Every delivery must carry ``X-Gitee-Timestamp`` and be sent as
    ``application/json`` exactly. With a secret configured, ``X-Gitee-Token``
    must equal it.
    """

    provider = GitProvider.GITEE
    event_header = "X-Gitee-Event"
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)

        if not request.header("X-Gitee-Timestamp"):
            raise MissingTimestampHeaderError()
        if request.header("Content-Type") != JSON_CONTENT_TYPE:
            raise ContentTypeError()

        tag = self.event_tag(request)

        if self._config.secret:
            token = request.header("X-Gitee-Token")
            if not secure_compare(token, self._config.secret):
                raise TokenVerificationFailedError()

        self.check_subscribed(tag, events)
        return self.decode(tag, request.read_body())
