"""
Option functions accepted by every parser constructor.

Each option returns a callable that mutates the parser's fresh
``WebhookConfig``. Errors raised by an option surface from the constructor
as ``OptionError``.
"""
from typing import Callable

from .models import WebhookConfig

Option = Callable[[WebhookConfig], None]


def _require_str(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def secret(value: str) -> Option:
    """Shared secret (GitHub, Gitea, Gitee, Bitbucket Server) or token (GitLab)."""
    def apply(config: WebhookConfig) -> None:
        _require_str("secret", value)
        config.secret = value
    return apply


def basic_auth(username: str, password: str) -> Option:
    """HTTP Basic credentials the delivery must carry (Azure DevOps)."""
    def apply(config: WebhookConfig) -> None:
        _require_str("username", username)
        _require_str("password", password)
        config.username = username
        config.password = password
    return apply


def hook_uuid(value: str) -> Option:
    """Instance UUID the ``X-Hook-UUID`` header must equal (Bitbucket Cloud)."""
    def apply(config: WebhookConfig) -> None:
        _require_str("uuid", value)
        config.uuid = value
    return apply
