"""
journeystats Telemetry Infrastructure

Architectural Intent:
- OpenTelemetry integration for deployment analytics
- Tracked events exported as OTLP counters
"""

from journeystats.infrastructure.telemetry.otel_tracking import (
    OTELTrackingAdapter,
    OTELConfig,
)

__all__ = [
    "OTELTrackingAdapter",
    "OTELConfig",
]
