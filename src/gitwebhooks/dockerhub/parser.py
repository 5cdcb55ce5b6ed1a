"""
Docker Hub webhook parser.
"""
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser
from ..webhook.request import WebhookRequest
from .models import PAYLOADS, Event


class DockerHubWebhookParser(WebhookParser):
    """Parser for Docker Hub repository webhooks.

    Docker Hub neither names the event nor authenticates the delivery, so
    every request is treated as a ``build`` event.
    """

    provider = GitProvider.DOCKERHUB
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)
        tag = Event.BUILD.value
        self.check_subscribed(tag, events)
        return self.decode(tag, request.read_body())
