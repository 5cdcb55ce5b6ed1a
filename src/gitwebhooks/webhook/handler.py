"""
Webhook request handler.
"""
from typing import Awaitable, Callable

from fastapi import HTTPException, Request, status

from ..logger import logger
from .errors import EventNotFoundError, WebhookError
from .models import GitProvider, Payload
from .parser import EventLike, WebhookParser, event_value
from .request import WebhookRequest

EventCallback = Callable[[GitProvider, Payload], Awaitable[None]]


class WebhookHandler:
    """Handles incoming webhook requests.

    Parsers are registered per provider together with the events to
    subscribe to. Accepted payloads are passed to every registered callback;
    a failing callback is logged and does not fail the delivery.
    """

    def __init__(self):
        self._parsers: dict[GitProvider, tuple[WebhookParser, list[str]]] = {}
        self._event_callbacks: list[EventCallback] = []

    @property
    def providers(self) -> list[GitProvider]:
        return list(self._parsers)

    def register(self, parser: WebhookParser, *events: EventLike) -> None:
        """Mount a parser; with no events, subscribe to all it supports."""
        subscribed = [event_value(event) for event in events] or parser.supported_events()
        self._parsers[parser.provider] = (parser, subscribed)

    def on_event(self, callback: EventCallback) -> None:
        """Register callback for accepted payloads."""
        self._event_callbacks.append(callback)

    async def handle_webhook(self, request: Request, provider: GitProvider) -> dict:
        """
        Handle incoming webhook request.

        Args:
            request: FastAPI request object
            provider: Git provider the delivery was sent to

        Returns:
            Response dict

        Raises:
            HTTPException: If the provider is not mounted or the delivery is rejected
        """
        entry = self._parsers.get(provider)
        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Provider not configured: {provider.value}"
            )
        parser, events = entry

        body = await request.body()
        hook_request = WebhookRequest.from_bytes(request.method, request.headers, body)

        try:
            payload = parser.parse(hook_request, *events)
        except EventNotFoundError as e:
            return {"status": "ignored", "reason": e.message}
        except WebhookError as e:
            logger.warning(f"Rejected {provider.value} webhook: {e.message}")
            raise HTTPException(status_code=e.status_code, detail=e.message) from e

        logger.info(f"Received {provider.value} event: {payload.hook_event}")

        for callback in self._event_callbacks:
            try:
                await callback(provider, payload)
            except Exception as e:
                # Log error but don't fail the webhook
                logger.error(f"Error in callback: {e}", exc_info=True)

        return {
            "status": "success",
            "provider": provider.value,
            "event": payload.hook_event,
        }
