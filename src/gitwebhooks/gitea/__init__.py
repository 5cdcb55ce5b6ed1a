"""
Gitea webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import GiteaWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "GiteaWebhookParser",
    "models",
]
