"""
Azure DevOps service hooks.
"""
from . import models
from .models import PAYLOADS, Event
from .parser import AzureDevOpsWebhookParser

__all__ = [
    "Event",
    "PAYLOADS",
    "AzureDevOpsWebhookParser",
    "models",
]
