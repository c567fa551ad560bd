from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core.grid import Connectivity, Coordinate, Direction
from ..encounters.registry import EncounterSpec


@dataclass(frozen=True)
class TileState:
    """The generated layout of one tile. Created once, never re-rolled.

    entry_direction is the move that first reached the tile; None for the origin.
    """

    coordinate: Coordinate
    connectivity: Connectivity
    encounters: Tuple[EncounterSpec, ...] = ()
    entry_direction: Optional[Direction] = None

    @property
    def is_origin(self) -> bool:
        return self.entry_direction is None

    @property
    def has_encounters(self) -> bool:
        return len(self.encounters) > 0

    def allows(self, direction: Direction) -> bool:
        return self.connectivity.allows(direction)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "coordinate": list(self.coordinate.as_tuple()),
            "connectivity": self.connectivity.as_dict(),
            "encounters": [e.as_dict() for e in self.encounters],
            "entry_direction": self.entry_direction.name.lower() if self.entry_direction else None,
        }
