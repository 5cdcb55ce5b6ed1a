"""
Webhook handling module.

Provider-independent building blocks: the request wrapper, option
functions, the error taxonomy, the parser base class and the FastAPI
adapter.
"""
from . import errors, options
from .errors import WebhookError
from .handler import WebhookHandler
from .models import GitProvider, Payload, Schema, WebhookConfig
from .parser import WebhookParser, secure_compare
from .request import WebhookRequest

__all__ = [
    "errors",
    "options",
    "GitProvider",
    "Payload",
    "Schema",
    "WebhookConfig",
    "WebhookError",
    "WebhookHandler",
    "WebhookParser",
    "WebhookRequest",
    "secure_compare",
]
