"""
Event Bus Port

Architectural Intent:
- Abstract interface for subscribing to and publishing named application events
- Allows decoupling of event producers from consumers
- Implementation can be in-memory or bridged to the desktop app's IPC channel
"""

from typing import Any, Protocol, Callable, Awaitable, runtime_checkable

EventHandler = Callable[[Any], Awaitable[None]]
Subscribe = Callable[[str, EventHandler], None]


@runtime_checkable
class EventBusPort(Protocol):
    async def publish(self, event_name: str, event: Any) -> None: ...

    def subscribe(self, event_name: str, handler: EventHandler) -> None: ...
