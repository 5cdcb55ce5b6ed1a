"""
gitwebhooks - receive, verify and decode webhooks from Git hosting and
DevOps platforms.
"""
from .factory import WebhookParserFactory
from .webhook import (
    GitProvider,
    Payload,
    WebhookConfig,
    WebhookError,
    WebhookHandler,
    WebhookParser,
    WebhookRequest,
    errors,
    options,
)

__version__ = "1.0.0"

__all__ = [
    "GitProvider",
    "Payload",
    "WebhookConfig",
    "WebhookError",
    "WebhookHandler",
    "WebhookParser",
    "WebhookParserFactory",
    "WebhookRequest",
    "errors",
    "options",
]
