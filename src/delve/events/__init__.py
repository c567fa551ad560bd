from .event_bus import Event, EventBus
from .types import EventType, MoveKind, TileArrived, TileEntered

__all__ = [
    "Event",
    "EventBus",
    "EventType",
    "MoveKind",
    "TileArrived",
    "TileEntered",
]
