"""
Deployment Event Handler

Architectural Intent:
- Subscribes to deployment success/failure events on the injected event bus
- Maps each event to one normalized AnalyticsRecord and forwards it to the tracking sink
- Stateless: nothing is retained between invocations

Design Decisions:
- Tab types outside DiagramType are ignored without a tracking call
- Unknown or missing UI context falls back to the "deploy" event prefix
- Engine profiles are derived only for successful deployments without deployedTo
"""

import logging
from typing import Optional

from journeystats.domain.events.deployment_events import (
    DEPLOYMENT_DONE,
    DEPLOYMENT_ERROR,
    DEPLOYMENT_TOOL,
    START_INSTANCE_TOOL,
    DeploymentDoneEvent,
    DeploymentErrorEvent,
)
from journeystats.domain.ports.engine_profile_port import EngineProfilePort
from journeystats.domain.ports.event_bus_port import Subscribe
from journeystats.domain.ports.tracking_port import Track
from journeystats.domain.services.engine_profile import EngineProfileExtractor
from journeystats.domain.value_objects.analytics_record import AnalyticsRecord

logger = logging.getLogger(__name__)

EVENT_PREFIXES = {
    DEPLOYMENT_TOOL: "deploy",
    START_INSTANCE_TOOL: "startInstance",
}
DEFAULT_PREFIX = "deploy"


def event_name_for(context: Optional[str], outcome: str) -> str:
    """Build the tracked event name, e.g. "startInstance:error"."""
    prefix = EVENT_PREFIXES.get(context)
    if prefix is None:
        logger.debug("Unknown deployment context %r, using %r", context, DEFAULT_PREFIX)
        prefix = DEFAULT_PREFIX
    return f"{prefix}:{outcome}"


class DeploymentEventHandler:
    def __init__(
        self,
        track: Track,
        subscribe: Subscribe,
        extractor: Optional[EngineProfilePort] = None,
    ):
        self.track = track
        self.extractor = extractor or EngineProfileExtractor()

        subscribe(DEPLOYMENT_DONE, self.handle_deployment_done)
        subscribe(DEPLOYMENT_ERROR, self.handle_deployment_error)

    async def handle_deployment_done(self, event: DeploymentDoneEvent) -> None:
        tab = event.tab
        diagram_type = tab.diagram_type
        if diagram_type is None:
            logger.debug("Ignoring deployment of unsupported tab type %r", tab.type)
            return

        event_name = event_name_for(event.context, "success")

        if event.deployed_to is not None:
            record = AnalyticsRecord(
                diagram_type=diagram_type.family,
                deployed_to=event.deployed_to,
            )
        else:
            profile = await self.extractor.resolve_async(tab.file.contents, diagram_type)
            record = AnalyticsRecord(
                diagram_type=diagram_type.family,
                target_type=event.target_type,
                engine_profile=profile,
            )

        logger.info(
            "Tracking %s for %s diagram",
            event_name,
            diagram_type.value,
            extra={"analytics_event": event_name},
        )
        self.track(event_name, record)

    async def handle_deployment_error(self, event: DeploymentErrorEvent) -> None:
        tab = event.tab
        diagram_type = tab.diagram_type
        if diagram_type is None:
            logger.debug("Ignoring deployment error of unsupported tab type %r", tab.type)
            return

        event_name = event_name_for(event.context, "error")
        record = AnalyticsRecord(
            diagram_type=diagram_type.family,
            error=event.error.code,
            deployed_to=event.deployed_to,
        )

        logger.info(
            "Tracking %s for %s diagram",
            event_name,
            diagram_type.value,
            extra={"analytics_event": event_name},
        )
        self.track(event_name, record)
