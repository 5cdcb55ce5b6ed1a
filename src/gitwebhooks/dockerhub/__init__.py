"""
Docker Hub webhooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import DockerHubWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "DockerHubWebhookParser",
    "models",
]
