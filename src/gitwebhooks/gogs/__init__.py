"""
Gogs webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import GogsWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "GogsWebhookParser",
    "models",
]
