"""
OpenTelemetry Tracking Adapter

Architectural Intent:
- Implements TrackingPort by counting tracked events as OTLP metrics
- Lets deployment analytics land in any OTLP-compatible backend
  (Prometheus, Datadog, Grafana, etc.) alongside the Mixpanel stream

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
- Validation in __post_init__ prevents accidental plaintext export
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Any, Mapping
from urllib.parse import urlparse
import logging
from datetime import datetime, UTC

from journeystats.domain.value_objects.analytics_record import AnalyticsRecord

logger = logging.getLogger(__name__)

TRACKED_EVENTS_METRIC = "journeystats.events.tracked"

# Oldest events are dropped once the local buffer is full
MAX_BUFFERED_EVENTS = 1000


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "journeystats"
    environment: str = "development"
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


def flatten_attributes(
    data: Mapping[str, Any], prefix: str = ""
) -> dict[str, str]:
    """Flatten a record into string-valued metric attributes.

    Nested mappings become dotted keys: {"deployedTo": {"a": 1}} -> {"deployedTo.a": "1"}
    """
    attributes: dict[str, str] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            attributes.update(flatten_attributes(value, prefix=f"{name}."))
        elif value is not None:
            attributes[name] = str(value)
    return attributes


class OTELTrackingAdapter:
    """
    Tracking sink exporting one counter increment per analytics event.

    Until initialize() has set up the OpenTelemetry SDK, events are kept in a
    bounded local buffer. Afterwards they go to the counter only.
    """

    def __init__(self, config: OTELConfig, max_buffered: int = MAX_BUFFERED_EVENTS):
        self.config = config
        self._initialized = False
        self._events_buffer: deque[dict[str, Any]] = deque(maxlen=max_buffered)
        self._counter: Any = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize OpenTelemetry SDK and the OTLP metric exporter."""
        if not self.config.endpoint:
            logger.info("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import Resource, SERVICE_NAME
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )

            resource = Resource(
                attributes={
                    SERVICE_NAME: self.config.service_name,
                    "environment": self.config.environment,
                }
            )
            metric_reader = PeriodicExportingMetricReader(
                OTLPMetricExporter(
                    endpoint=self.config.endpoint, insecure=self.config.insecure
                )
            )
            provider = MeterProvider(resource=resource, metric_readers=[metric_reader])
            metrics.set_meter_provider(provider)

            meter = metrics.get_meter(__name__)
            self._counter = meter.create_counter(
                TRACKED_EVENTS_METRIC,
                unit="1",
                description="Deployment analytics events tracked",
            )
            self._initialized = True

            for event in self.drain():
                self._counter.add(1, attributes=event["attributes"])

        except ImportError:
            logger.warning("OpenTelemetry SDK not installed, telemetry disabled")
            self._initialized = False
        except Exception as e:
            logger.error("Failed to initialize OTEL: %s", e)
            self._initialized = False

    def track(self, event_name: str, record: AnalyticsRecord) -> None:
        attributes = {"event": event_name}
        attributes.update(flatten_attributes(record.to_dict()))

        if self._initialized and self._counter is not None:
            self._counter.add(1, attributes=attributes)
            return

        self._events_buffer.append(
            {
                "name": event_name,
                "attributes": attributes,
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    def drain(self) -> list[dict[str, Any]]:
        """Return and clear the locally buffered events."""
        events = list(self._events_buffer)
        self._events_buffer.clear()
        if events:
            logger.debug("Drained %d buffered events", len(events))
        return events

