"""
Base webhook parser shared by all providers.
"""
import hmac
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, Mapping, Union

from pydantic import ValidationError

from ..logger import logger
from .errors import (
    EventNotFoundError,
    EventNotSpecifiedToParseError,
    InvalidHTTPMethodError,
    MissingEventHeaderError,
    OptionError,
    ParsingPayloadError,
    UnknownEventError,
)
from .models import GitProvider, Payload, WebhookConfig
from .options import Option
from .request import WebhookRequest

EventLike = Union[str, Enum]


def secure_compare(left: str, right: str) -> bool:
    """Constant-time string equality."""
    return hmac.compare_digest(left.encode("utf-8"), right.encode("utf-8"))


def event_value(event: EventLike) -> str:
    return event.value if isinstance(event, Enum) else str(event)


class WebhookParser(ABC):
    """Abstract base class for webhook parsers.

    Subclasses declare their provider, the header carrying the event tag and
    the tag to payload-model table, and implement ``_parse`` with the
    provider's verification order using the step helpers below.
    """

    provider: ClassVar[GitProvider]
    event_header: ClassVar[str] = ""
    payloads: ClassVar[Mapping[str, type[Payload]]] = {}

    def __init__(self, *options: Option):
        config = WebhookConfig(provider=self.provider)
        for option in options:
            try:
                option(config)
            except Exception as e:
                raise OptionError() from e
        self.validate_config(config)
        self._config = config

    @property
    def config(self) -> WebhookConfig:
        """Copy of the configuration this parser verifies against."""
        return self._config.model_copy()

    @classmethod
    def supported_events(cls) -> list[str]:
        """Every event tag this parser can decode."""
        return list(cls.payloads)

    def validate_config(self, config: WebhookConfig) -> None:
        """Reject configurations missing mandatory credentials."""

    def parse(self, request: WebhookRequest, *events: EventLike) -> Payload:
        """
        Verify and decode one webhook delivery.

        Args:
            request: The incoming request; its body is drained and closed
                before this returns, whatever the outcome.
            events: Event tags the caller is interested in.

        Returns:
            The payload model for the delivered event.

        Raises:
            WebhookError: A subclass describing why the delivery was rejected.
        """
        try:
            return self._parse(request, [event_value(event) for event in events])
        finally:
            request.close()

    @abstractmethod
    def _parse(self, request: WebhookRequest, events: list[str]) -> Payload:
        pass

    def check_method(self, request: WebhookRequest) -> None:
        if request.method != "POST":
            logger.debug(f"Rejecting {self.provider.value} delivery with method {request.method}")
            raise InvalidHTTPMethodError()

    def check_events_specified(self, events: list[str]) -> None:
        if not events:
            raise EventNotSpecifiedToParseError()

    def event_tag(self, request: WebhookRequest) -> str:
        tag = request.header(self.event_header)
        if not tag:
            raise MissingEventHeaderError(f"missing {self.event_header} Header")
        return tag

    def check_subscribed(self, tag: str, events: list[str]) -> None:
        if tag not in events:
            logger.debug(f"Ignoring {self.provider.value} event {tag!r}: not subscribed")
            raise EventNotFoundError()

    def verify_signature(self, payload_body: bytes, signature: str, digestmod: Callable) -> bool:
        """Compare a hex HMAC of the body, keyed by the secret, in constant time."""
        expected_signature = hmac.new(
            self._config.secret.encode(),
            payload_body,
            digestmod
        ).hexdigest()

        return hmac.compare_digest(signature.encode(), expected_signature.encode())

    def decode(self, tag: str, body: bytes) -> Payload:
        model = self.payloads.get(tag)
        if model is None:
            raise UnknownEventError(tag)
        return self.decode_as(model, tag, body)

    @staticmethod
    def decode_as(model: type[Payload], tag: str, body: bytes) -> Payload:
        try:
            payload = model.model_validate_json(body)
        except ValidationError as e:
            raise ParsingPayloadError() from e
        return payload.with_event(tag)
