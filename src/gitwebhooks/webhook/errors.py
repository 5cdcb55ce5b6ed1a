"""
Webhook error taxonomy.

Every failure a parser can report derives from ``WebhookError``. The
``status_code`` attribute is the HTTP status the bundled FastAPI adapter
answers with; library callers are free to choose their own.
"""
from typing import Any, Optional


class WebhookError(Exception):
    """Base class for all webhook parsing failures."""

    status_code: int = 400
    default_message: str = "webhook error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class OptionError(WebhookError):
    """An option function failed while configuring a parser."""

    status_code = 500
    default_message = "error applying option"


class InvalidHTTPMethodError(WebhookError):
    status_code = 405
    default_message = "invalid HTTP Method"


class MissingEventHeaderError(WebhookError):
    default_message = "missing event header"


class EventNotSpecifiedToParseError(WebhookError):
    """The caller subscribed to no events at all."""

    status_code = 500
    default_message = "no Event specified to parse"


class EventNotFoundError(WebhookError):
    """The delivered event is not in the caller's subscription list.

    This is a filter rather than a failure, so the suggested status is 200.
    """

    status_code = 200
    default_message = "event not defined to be parsed"


class ParsingPayloadError(WebhookError):
    default_message = "error parsing payload"


class UnknownEventError(WebhookError):
    default_message = "unknown event"

    def __init__(self, event: str):
        super().__init__(f"unknown event {event}")
        self.event = event


class MissingSignatureHeaderError(WebhookError):
    status_code = 403
    default_message = "missing X-Hub-Signature Header"


class HMACVerificationFailedError(WebhookError):
    status_code = 403
    default_message = "HMAC verification failed"


class SecretNotMatchError(WebhookError):
    """The secret embedded in the payload body did not match.

    The decoded payload is attached for diagnostics; it must still be
    treated as rejected.
    """

    status_code = 403
    default_message = "secret verification failed"

    def __init__(self, message: Optional[str] = None, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class TokenVerificationFailedError(WebhookError):
    status_code = 403
    default_message = "token validation failed"


class MissingUUIDError(WebhookError):
    default_message = "missing X-Hook-UUID Header"


class UUIDMismatchError(WebhookError):
    status_code = 403
    default_message = "UUID verification failed"


class BasicAuthVerificationFailedError(WebhookError):
    status_code = 401
    default_message = "basic auth verification failed"


class ContentTypeError(WebhookError):
    status_code = 415
    default_message = "invalid content type"


class MissingTimestampHeaderError(WebhookError):
    default_message = "missing timestamp header"


__all__ = [
    "WebhookError",
    "OptionError",
    "InvalidHTTPMethodError",
    "MissingEventHeaderError",
    "EventNotSpecifiedToParseError",
    "EventNotFoundError",
    "ParsingPayloadError",
    "UnknownEventError",
    "MissingSignatureHeaderError",
    "HMACVerificationFailedError",
    "SecretNotMatchError",
    "TokenVerificationFailedError",
    "MissingUUIDError",
    "UUIDMismatchError",
    "BasicAuthVerificationFailedError",
    "ContentTypeError",
    "MissingTimestampHeaderError",
]
