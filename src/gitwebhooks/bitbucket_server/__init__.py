"""
Bitbucket Server webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import BitbucketServerWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "BitbucketServerWebhookParser",
    "models",
]
