"""
Gitee webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import GiteeWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "GiteeWebhookParser",
    "models",
]
