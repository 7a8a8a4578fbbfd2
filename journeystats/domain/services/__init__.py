"""
Domain Services Package

Architectural Intent:
- Contains domain services implementing business logic
"""

from journeystats.domain.services.engine_profile import (
    EngineProfileExtractor,
    MODELER_NS,
)

__all__ = [
    "EngineProfileExtractor",
    "MODELER_NS",
]
