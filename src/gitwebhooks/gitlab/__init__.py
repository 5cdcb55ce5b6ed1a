"""
GitLab webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import GitLabWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "GitLabWebhookParser",
    "models",
]
