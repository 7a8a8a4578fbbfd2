"""
Deployment Events Module

Architectural Intent:
- Application-level deployment lifecycle events delivered by the event bus
- Events are immutable and scoped to a single handler invocation
- from_dict() validates raw payloads at the boundary (CLI replay, IPC)

Event names:
- DEPLOYMENT_DONE: a deployment or start-instance action succeeded
- DEPLOYMENT_ERROR: a deployment or start-instance action failed
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from journeystats.domain.value_objects.tab import Tab

DEPLOYMENT_DONE = "deployment.done"
DEPLOYMENT_ERROR = "deployment.error"

DEPLOYMENT_TOOL = "deploymentTool"
START_INSTANCE_TOOL = "startInstanceTool"


def _require_mapping(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValueError("event payload must be an object")
    if "tab" not in payload:
        raise ValueError("event payload is missing 'tab'")
    return payload


def _optional_mapping(value: Any, name: str) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' must be an object")
    return value


@dataclass(frozen=True)
class DeploymentError:
    code: Optional[str] = None
    message: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "DeploymentError":
        if data is None:
            return cls()
        if isinstance(data, str):
            return cls(code=data)
        if not isinstance(data, dict):
            raise ValueError("'error' must be an object")
        return cls(code=data.get("code"), message=data.get("message") or "")


@dataclass(frozen=True)
class DeploymentDoneEvent:
    tab: Tab
    context: Optional[str] = None
    deployed_to: Optional[Mapping[str, Any]] = None
    target_type: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "DeploymentDoneEvent":
        payload = _require_mapping(payload)
        return cls(
            tab=Tab.from_dict(payload["tab"]),
            context=payload.get("context"),
            deployed_to=_optional_mapping(payload.get("deployedTo"), "deployedTo"),
            target_type=payload.get("targetType"),
        )


@dataclass(frozen=True)
class DeploymentErrorEvent:
    tab: Tab
    error: DeploymentError
    context: Optional[str] = None
    deployed_to: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "DeploymentErrorEvent":
        payload = _require_mapping(payload)
        return cls(
            tab=Tab.from_dict(payload["tab"]),
            error=DeploymentError.from_dict(payload.get("error")),
            context=payload.get("context"),
            deployed_to=_optional_mapping(payload.get("deployedTo"), "deployedTo"),
        )


EVENT_TYPES = {
    DEPLOYMENT_DONE: DeploymentDoneEvent,
    DEPLOYMENT_ERROR: DeploymentErrorEvent,
}
