"""
GitHub webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import GitHubWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "GitHubWebhookParser",
    "models",
]
