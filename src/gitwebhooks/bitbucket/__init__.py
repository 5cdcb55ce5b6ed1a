"""
Bitbucket Cloud webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import BitbucketWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "BitbucketWebhookParser",
    "models",
]
