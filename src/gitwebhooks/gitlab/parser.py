"""
GitLab webhook parser.
"""
from ..logger import logger
from ..webhook.errors import ParsingPayloadError, TokenVerificationFailedError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser, secure_compare
from ..webhook.request import WebhookRequest
from .models import (
    PAYLOADS,
    SYSTEM_EVENTS,
    SYSTEM_OBJECT_KINDS,
    Event,
    JobEventPayload,
    SystemHookPayload,
)


class GitLabWebhookParser(WebhookParser):
    """Parser for GitLab project, group and system hooks.

    ``Job Hook`` deliveries describing a build and ``System Hook``
    deliveries mirroring push, tag push or merge request events are decoded
    as those events, and only if the caller subscribed to them too.
    """

    provider = GitProvider.GITLAB
    event_header = "X-Gitlab-Event"
    payloads = PAYLOADS

    @classmethod
    def supported_events(cls) -> list[str]:
        return [event.value for event in Event]

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        self.check_events_specified(events)

        if self._config.secret:
            token = request.header("X-Gitlab-Token")
            if not secure_compare(token, self._config.secret):
                raise TokenVerificationFailedError("X-Gitlab-Token validation failed")

        tag = self.event_tag(request)
        self.check_subscribed(tag, events)
        body = request.read_body()

        if tag == Event.JOB.value:
            return self._parse_job(body, events)
        if tag == Event.SYSTEM.value:
            return self._parse_system(body, events)
        return self.decode(tag, body)

    def _dispatch(self, tag: str, body: bytes, events: list[str]) -> Payload:
        self.check_subscribed(tag, events)
        return self.decode(tag, body)

    def _parse_job(self, body: bytes, events: list[str]) -> Payload:
        payload = self.decode(Event.JOB.value, body)
        if isinstance(payload, JobEventPayload) and payload.object_kind == "build":
            return self._dispatch(Event.BUILD.value, body, events)
        return payload

    def _parse_system(self, body: bytes, events: list[str]) -> Payload:
        envelope = self.decode_as(SystemHookPayload, Event.SYSTEM.value, body)

        if envelope.object_kind in SYSTEM_OBJECT_KINDS:
            return self._dispatch(SYSTEM_OBJECT_KINDS[envelope.object_kind], body, events)
        if envelope.event_name in SYSTEM_OBJECT_KINDS:
            return self._dispatch(SYSTEM_OBJECT_KINDS[envelope.event_name], body, events)

        model = SYSTEM_EVENTS.get(envelope.event_name)
        if model is None:
            logger.debug(f"Unrecognised GitLab system event {envelope.event_name!r}")
            raise ParsingPayloadError("error parsing system payload")
        return self.decode_as(model, Event.SYSTEM.value, body)
