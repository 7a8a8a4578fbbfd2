"""
Analytics Record Value Object

Architectural Intent:
- Normalized telemetry record handed to tracking sinks
- Immutable; optional fields are omitted from the wire form when absent
- Wire keys are camelCase to match the analytics backend schema
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from journeystats.domain.value_objects.diagram_type import DiagramFamily
from journeystats.domain.value_objects.engine_profile import EngineProfile


@dataclass(frozen=True)
class AnalyticsRecord:
    diagram_type: DiagramFamily
    deployed_to: Optional[Mapping[str, Any]] = None
    error: Optional[str] = None
    target_type: Optional[str] = None
    engine_profile: Optional[EngineProfile] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"diagramType": self.diagram_type.value}
        if self.deployed_to is not None:
            data["deployedTo"] = self.deployed_to
        if self.error is not None:
            data["error"] = self.error
        if self.target_type is not None:
            data["targetType"] = self.target_type
        if self.engine_profile is not None:
            data.update(self.engine_profile.to_dict())
        return data
