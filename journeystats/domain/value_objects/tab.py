from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from journeystats.domain.value_objects.diagram_type import DiagramType


@dataclass(frozen=True)
class TabFile:
    """
    Value Object for the file backing an editor tab.
    """
    contents: str = ""
    name: str = ""
    path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "TabFile":
        data = data or {}
        return cls(
            contents=data.get("contents") or "",
            name=data.get("name") or "",
            path=data.get("path"),
        )


@dataclass(frozen=True)
class Tab:
    """
    Value Object representing an open diagram editor session.
    """
    type: str
    file: TabFile = field(default_factory=TabFile)
    id: Optional[Any] = None
    name: str = ""
    title: str = ""

    @property
    def diagram_type(self) -> Optional[DiagramType]:
        return DiagramType.parse(self.type)

    @classmethod
    def from_dict(cls, data: Any) -> "Tab":
        if not isinstance(data, dict):
            raise ValueError("tab must be an object")
        return cls(
            type=str(data.get("type") or ""),
            file=TabFile.from_dict(data.get("file")),
            id=data.get("id"),
            name=data.get("name") or "",
            title=data.get("title") or "",
        )
