"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus keyed by application event name ("deployment.done", ...)
- Supports async subscription handlers, awaited serially in registration order
- Can be extended to bridge the desktop app's IPC channel
"""

import logging
from typing import Any

from journeystats.domain.ports.event_bus_port import EventHandler

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    async def publish(self, event_name: str, event: Any) -> None:
        handlers = list(self._handlers.get(event_name, ()))
        if not handlers:
            logger.debug("No subscribers for %s", event_name)
        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception("Handler for %s failed", event_name)
                raise

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        if event_name not in self._handlers:
            self._handlers[event_name] = []
        self._handlers[event_name].append(handler)

    def unsubscribe(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_name, [])
        if handler in handlers:
            handlers.remove(handler)
