from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..core.grid import Connectivity, Coordinate


class EventType:
    """Centralized event names published by the navigation core."""

    # Emitted synchronously when request_move() succeeds (advance or backtrack)
    TILE_ENTERED = "tile.entered"

    # Emitted by on_arrived() once the presentation layer finished the move
    TILE_ARRIVED = "tile.arrived"


class MoveKind(Enum):
    ADVANCED = "advanced"
    BACKTRACKED = "backtracked"


@dataclass(frozen=True)
class TileEntered:
    """Payload of EventType.TILE_ENTERED."""

    coordinate: Coordinate
    connectivity: Connectivity
    encounters: Tuple[Any, ...]
    kind: MoveKind
    newly_generated: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {"event": self}


@dataclass(frozen=True)
class TileArrived:
    """Payload of EventType.TILE_ARRIVED."""

    coordinate: Coordinate
    encounters: Tuple[Any, ...]
    kind: Optional[MoveKind] = None

    @property
    def has_encounters(self) -> bool:
        return len(self.encounters) > 0

    def to_payload(self) -> Dict[str, Any]:
        return {"event": self}
