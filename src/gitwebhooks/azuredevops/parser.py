"""
Azure DevOps service hook parser.
"""
from ..webhook.errors import BasicAuthVerificationFailedError, MissingEventHeaderError
from ..webhook.models import GitProvider, Payload
from ..webhook.parser import WebhookParser, secure_compare
from ..webhook.request import WebhookRequest
from .models import PAYLOADS, BasicEvent


class AzureDevOpsWebhookParser(WebhookParser):
    """Parser for Azure DevOps service hooks.

    The event is only known once the body is read, so the body is decoded
    twice: first as a ``BasicEvent`` to read ``eventType``, then as the
    full event model. Basic auth is enforced when either a username or a
    password is configured.
    """

    provider = GitProvider.AZURE_DEVOPS
    payloads = PAYLOADS

    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        self.check_method(request)
        if self._config.username or self._config.password:
            self._check_basic_auth(request)
        self.check_events_specified(events)

        body = request.read_body()
        envelope = self.decode_as(BasicEvent, "", body)
        tag = envelope.event_type
        if not tag:
            raise MissingEventHeaderError("missing eventType in payload")

        self.check_subscribed(tag, events)
        return self.decode(tag, body)

    def _check_basic_auth(self, request: WebhookRequest) -> None:
        credentials = request.basic_auth()
        if credentials is None:
            raise BasicAuthVerificationFailedError()
        username, password = credentials
        # Evaluate both comparisons so timing does not reveal which one failed.
        user_ok = secure_compare(username, self._config.username)
        password_ok = secure_compare(password, self._config.password)
        if not (user_ok and password_ok):
            raise BasicAuthVerificationFailedError()
