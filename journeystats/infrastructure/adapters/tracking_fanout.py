"""
Tracking Fanout

Architectural Intent:
- Implements TrackingPort by forwarding each record to several sinks
- Lets the handler keep a single track() dependency while Mixpanel, OTEL
  and CLI printers all receive the same records
"""

import logging
from typing import Optional

from journeystats.domain.ports.tracking_port import TrackingPort
from journeystats.domain.value_objects.analytics_record import AnalyticsRecord

logger = logging.getLogger(__name__)


class TrackingFanout:
    def __init__(self, sinks: Optional[list[TrackingPort]] = None) -> None:
        self._sinks: list[TrackingPort] = list(sinks or [])

    @property
    def sinks(self) -> tuple[TrackingPort, ...]:
        return tuple(self._sinks)

    def add(self, sink: TrackingPort) -> None:
        self._sinks.append(sink)

    def track(self, event_name: str, record: AnalyticsRecord) -> None:
        logger.debug("Forwarding %s to %d sinks", event_name, len(self._sinks))
        for sink in self._sinks:
            sink.track(event_name, record)
