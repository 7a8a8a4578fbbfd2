"""
Tracking Port

Architectural Intent:
- Abstract interface for the analytics sink receiving normalized records
- Allows decoupling of event handlers from analytics providers (Mixpanel, OTEL, etc.)

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- track() is synchronous; delivery and batching belong to the adapter
- Adapters are constructed and injected explicitly, never process-wide singletons
"""

from typing import Callable, Protocol, runtime_checkable

from journeystats.domain.value_objects.analytics_record import AnalyticsRecord

Track = Callable[[str, AnalyticsRecord], None]


@runtime_checkable
class TrackingPort(Protocol):
    """Port for forwarding analytics records to an external backend."""

    def track(self, event_name: str, record: AnalyticsRecord) -> None:
        """Forward one analytics record.

        Args:
            event_name: Tracked event name, e.g. "deploy:success"
            record: Normalized analytics record
        """
        ...
