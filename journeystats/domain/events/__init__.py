"""
Domain Events Package

Architectural Intent:
- Contains the deployment lifecycle events consumed by analytics handlers
- Events are the primary mechanism for cross-boundary communication
"""

from journeystats.domain.events.deployment_events import (
    DEPLOYMENT_DONE,
    DEPLOYMENT_ERROR,
    DEPLOYMENT_TOOL,
    START_INSTANCE_TOOL,
    EVENT_TYPES,
    DeploymentError,
    DeploymentDoneEvent,
    DeploymentErrorEvent,
)

__all__ = [
    "DEPLOYMENT_DONE",
    "DEPLOYMENT_ERROR",
    "DEPLOYMENT_TOOL",
    "START_INSTANCE_TOOL",
    "EVENT_TYPES",
    "DeploymentError",
    "DeploymentDoneEvent",
    "DeploymentErrorEvent",
]
