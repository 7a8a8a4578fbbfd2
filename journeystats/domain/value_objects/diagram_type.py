"""
Diagram Type Value Object

Architectural Intent:
- Closed enumeration of the editor tab types that produce deployment analytics
- Each member knows its diagram family and whether it targets the cloud runtime
- Unsupported tab types parse to None so callers handle them explicitly
"""

from __future__ import annotations
from enum import Enum
from typing import Optional


class DiagramFamily(Enum):
    BPMN = "bpmn"
    DMN = "dmn"


class DiagramType(Enum):
    BPMN = "bpmn"
    CLOUD_BPMN = "cloud-bpmn"
    DMN = "dmn"
    CLOUD_DMN = "cloud-dmn"

    @property
    def family(self) -> DiagramFamily:
        if self in (DiagramType.BPMN, DiagramType.CLOUD_BPMN):
            return DiagramFamily.BPMN
        return DiagramFamily.DMN

    @property
    def is_cloud(self) -> bool:
        return self in (DiagramType.CLOUD_BPMN, DiagramType.CLOUD_DMN)

    @classmethod
    def parse(cls, tab_type: Optional[str]) -> Optional["DiagramType"]:
        """Return the member for a tab type, or None if it is not tracked."""
        try:
            return cls(tab_type)
        except ValueError:
            return None
