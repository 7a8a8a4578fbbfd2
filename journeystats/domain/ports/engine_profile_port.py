"""
Engine Profile Port

Architectural Intent:
- Abstract interface for reading engine-profile metadata from diagram source
- Extraction is best-effort: implementations return None instead of raising
- Resolution always yields a profile, falling back to the per-type default
"""

from typing import Optional, Protocol, runtime_checkable

from journeystats.domain.value_objects.diagram_type import DiagramFamily, DiagramType
from journeystats.domain.value_objects.engine_profile import EngineProfile


@runtime_checkable
class EngineProfilePort(Protocol):
    async def extract_async(
        self, source: str, family: DiagramFamily
    ) -> Optional[EngineProfile]: ...

    async def resolve_async(
        self, source: str, diagram_type: DiagramType
    ) -> EngineProfile: ...
