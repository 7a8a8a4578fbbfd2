"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from journeystats.domain.ports.event_bus_port import EventBusPort
from journeystats.domain.ports.tracking_port import TrackingPort
from journeystats.domain.ports.engine_profile_port import EngineProfilePort

__all__ = [
    "EventBusPort",
    "TrackingPort",
    "EngineProfilePort",
]
