"""
Composition Root

Architectural Intent:
- Dependency injection composition root for journeystats
- Single place where the event bus, tracking sinks and handlers are wired together
- No adapter instantiation should occur outside this module (except tests)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- The Mixpanel adapter is enabled here from config, never through global state
- OTEL initialization is async and left to the caller (see initialize_telemetry)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from journeystats.application.event_handlers.deployment_event_handler import (
    DeploymentEventHandler,
)
from journeystats.domain.services.engine_profile import EngineProfileExtractor
from journeystats.infrastructure.adapters.mixpanel_adapter import MixpanelAdapter
from journeystats.infrastructure.adapters.tracking_fanout import TrackingFanout
from journeystats.infrastructure.config import JourneyStatsConfig
from journeystats.infrastructure.event_bus import EventBus
from journeystats.infrastructure.telemetry.otel_tracking import (
    OTELConfig,
    OTELTrackingAdapter,
)

logger = logging.getLogger(__name__)


@dataclass
class JourneyStatsContainer:
    """DI container holding all wired dependencies."""

    config: JourneyStatsConfig
    event_bus: EventBus
    extractor: EngineProfileExtractor
    mixpanel: MixpanelAdapter
    otel: OTELTrackingAdapter
    tracker: TrackingFanout
    deployment_handler: DeploymentEventHandler


def create_container(config: Optional[JourneyStatsConfig] = None) -> JourneyStatsContainer:
    """Create and wire all dependencies."""
    config = config or JourneyStatsConfig()

    event_bus = EventBus()
    extractor = EngineProfileExtractor()

    mixpanel = MixpanelAdapter(
        endpoint=config.analytics.endpoint, timeout=config.analytics.timeout
    )
    if config.analytics.is_active:
        mixpanel.enable(
            config.analytics.token, config.analytics.user_id, config.analytics.stage
        )
    else:
        logger.info("Analytics not configured, Mixpanel tracking disabled")

    otel = OTELTrackingAdapter(
        OTELConfig(
            endpoint=config.telemetry.endpoint,
            service_name=config.telemetry.service_name,
            insecure=config.telemetry.insecure,
        )
    )

    tracker = TrackingFanout([mixpanel, otel])
    deployment_handler = DeploymentEventHandler(
        tracker.track, event_bus.subscribe, extractor
    )

    return JourneyStatsContainer(
        config=config,
        event_bus=event_bus,
        extractor=extractor,
        mixpanel=mixpanel,
        otel=otel,
        tracker=tracker,
        deployment_handler=deployment_handler,
    )


async def initialize_telemetry(container: JourneyStatsContainer) -> None:
    await container.otel.initialize()
