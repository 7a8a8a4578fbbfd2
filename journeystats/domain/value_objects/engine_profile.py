"""
Engine Profile Value Object

Architectural Intent:
- Immutable (platform, version) pair describing the runtime a diagram targets
- Knows the canonical platform names and the default profile per diagram type
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from journeystats.domain.value_objects.diagram_type import DiagramType

PLATFORM = "Camunda Platform"
CLOUD = "Camunda Cloud"

# Lower-cased spellings found in diagram metadata
_PLATFORM_ALIASES = {
    "camunda": PLATFORM,
    "camunda platform": PLATFORM,
    "camunda platform 7": PLATFORM,
    "camunda cloud": CLOUD,
    "camunda platform 8": CLOUD,
}


def normalize_platform(name: Optional[str]) -> Optional[str]:
    """Map a platform name to its canonical spelling, or None if unknown."""
    if not name:
        return None
    return _PLATFORM_ALIASES.get(name.strip().lower())


@dataclass(frozen=True)
class EngineProfile:
    execution_platform: str
    execution_platform_version: Optional[str] = None

    def __post_init__(self):
        if not self.execution_platform:
            raise ValueError("execution_platform cannot be empty")

    @classmethod
    def default_for(
        cls, diagram_type: DiagramType, version: Optional[str] = None
    ) -> "EngineProfile":
        """Default platform for the diagram type, keeping a version declared on its own."""
        return cls(CLOUD if diagram_type.is_cloud else PLATFORM, version or None)

    def to_dict(self) -> dict[str, str]:
        data = {"executionPlatform": self.execution_platform}
        if self.execution_platform_version:
            data["executionPlatformVersion"] = self.execution_platform_version
        return data
