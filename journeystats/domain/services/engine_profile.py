"""
Engine Profile Service

Architectural Intent:
- Domain service reading the engine profile a diagram was authored for
- Looks only at the root <definitions> element of BPMN/DMN documents
- Best-effort: empty, malformed or foreign documents yield no profile

Domain Logic:
- Platform and version live in modeler-namespace attributes on <definitions>
- Platform names are normalized to their canonical spelling
- resolve() substitutes the per-type default when no known platform is declared,
  keeping any version declared on its own
"""

from __future__ import annotations
import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Optional

from journeystats.domain.value_objects.diagram_type import DiagramFamily, DiagramType
from journeystats.domain.value_objects.engine_profile import (
    EngineProfile,
    normalize_platform,
)

logger = logging.getLogger(__name__)

MODELER_NS = "http://camunda.org/schema/modeler/1.0"

FAMILY_NAMESPACES = {
    DiagramFamily.BPMN: frozenset({
        "http://www.omg.org/spec/BPMN/20100524/MODEL",
    }),
    DiagramFamily.DMN: frozenset({
        "http://www.omg.org/spec/DMN/20151101/dmn.xsd",
        "http://www.omg.org/spec/DMN/20180521/MODEL/",
        "https://www.omg.org/spec/DMN/20191111/MODEL/",
    }),
}

_PLATFORM_ATTR = f"{{{MODELER_NS}}}executionPlatform"
_VERSION_ATTR = f"{{{MODELER_NS}}}executionPlatformVersion"


def _split_tag(tag: str) -> tuple[str, str]:
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


class EngineProfileExtractor:
    """
    Reads (platform, version) metadata from diagram source text.

    extract() returns the embedded profile if any, resolve() applies the
    defaulting rules for a concrete diagram type.
    """

    def _read_attributes(
        self, source: str, family: DiagramFamily
    ) -> tuple[Optional[str], Optional[str]]:
        if not source or not source.strip():
            return None, None

        try:
            root = ET.fromstring(source)
        except ET.ParseError as e:
            logger.debug("Unparsable %s source: %s", family.value, e)
            return None, None

        namespace, local = _split_tag(root.tag)
        if local != "definitions" or namespace not in FAMILY_NAMESPACES[family]:
            logger.debug("Root element %s is not a %s document", root.tag, family.value)
            return None, None

        return root.get(_PLATFORM_ATTR), root.get(_VERSION_ATTR)

    def _profile_from(
        self, platform: Optional[str], version: Optional[str]
    ) -> Optional[EngineProfile]:
        normalized = normalize_platform(platform)
        if normalized is None:
            if platform:
                logger.debug("Unrecognized execution platform %r", platform)
            return None
        return EngineProfile(normalized, version or None)

    def extract(self, source: str, family: DiagramFamily) -> Optional[EngineProfile]:
        """Return the embedded profile, or None if no known platform is declared."""
        return self._profile_from(*self._read_attributes(source, family))

    def resolve(self, source: str, diagram_type: DiagramType) -> EngineProfile:
        """Return the embedded profile or the default for the diagram type.

        A version declared without a recognized platform is kept on the default.
        """
        platform, version = self._read_attributes(source, diagram_type.family)
        profile = self._profile_from(platform, version)
        return profile or EngineProfile.default_for(diagram_type, version)

    async def extract_async(
        self, source: str, family: DiagramFamily
    ) -> Optional[EngineProfile]:
        return await asyncio.get_running_loop().run_in_executor(
            None, self.extract, source, family
        )

    async def resolve_async(self, source: str, diagram_type: DiagramType) -> EngineProfile:
        return await asyncio.get_running_loop().run_in_executor(
            None, self.resolve, source, diagram_type
        )
