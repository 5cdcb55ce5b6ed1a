"""
Bitbucket Cloud webhook parser.
"""
from ..webhook.errors import MissingUUIDError, OptionError, UUIDMismatchError
from ..webhook.models import GitProvider, Payload, WebhookConfig
from ..webhook.parser import WebhookParser, secure_compare
from ..webhook.request import WebhookRequest
from .models import PAYLOADS


class BitbucketWebhookParser(WebhookParser):
    """Parser for Bitbucket Cloud webhooks.

    Bitbucket Cloud does not sign deliveries; instead every request carries
    the hook's instance UUID in ``X-Hook-UUID``, which must match the one
    configured with the ``hook_uuid`` option. A parser cannot be built without it.
    """

    provider = GitProvider.BITBUCKET
    event_header = "X-Event-Key"
    payloads = PAYLOADS

    def validate_config(self, config: WebhookConfig) -> None:
        if not config.uuid:
            raise OptionError("Bitbucket Cloud webhooks require a UUID")

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)

        hook_uuid = request.header("X-Hook-UUID")
        if not hook_uuid:
            raise MissingUUIDError()
        if not secure_compare(hook_uuid, self._config.uuid):
            raise UUIDMismatchError()

        self.check_events_specified(events)
        tag = self.event_tag(request)
        self.check_subscribed(tag, events)
        return self.decode(tag, request.read_body())
