from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.grid import Coordinate
from ..events.event_bus import Event, EventBus
from ..events.types import EventType, TileEntered

logger = logging.getLogger(__name__)


@dataclass
class TileInstance:
    """A live, renderable stand-in for a generated tile.

    It refers to its TileState by coordinate only; look the state up in the
    store when drawing.
    """

    coordinate: Coordinate
    restored: bool = False


class TileInstanceRegistry:
    """Tracks which tiles currently have a live instance in the presentation layer.

    Listens to TILE_ENTERED. Entering a coordinate without a live instance
    spawns one; it is flagged ``restored`` when the tile was generated on an
    earlier visit. release() drops an instance (e.g. off-screen culling) and
    never touches the generated state.
    """

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self._instances: Dict[Coordinate, TileInstance] = {}
        self._bus = bus
        if bus is not None:
            bus.subscribe(EventType.TILE_ENTERED, self.on_tile_entered)

    def spawn(self, coordinate: Coordinate, restored: bool = False) -> TileInstance:
        existing = self._instances.get(coordinate)
        if existing is not None:
            return existing
        inst = TileInstance(coordinate=coordinate, restored=restored)
        self._instances[coordinate] = inst
        logger.debug("%s tile instance at %s", "Restored" if restored else "Spawned", coordinate)
        return inst

    def on_tile_entered(self, event: Event) -> None:
        entered: TileEntered = event.payload["event"]
        self.spawn(entered.coordinate, restored=not entered.newly_generated)

    def release(self, coordinate: Coordinate) -> bool:
        """Destroy the instance at coordinate. Returns False if none was live."""
        inst = self._instances.pop(coordinate, None)
        if inst is None:
            return False
        logger.debug("Released tile instance at %s", coordinate)
        return True

    def get(self, coordinate: Coordinate) -> Optional[TileInstance]:
        return self._instances.get(coordinate)

    def active_coordinates(self) -> List[Coordinate]:
        return sorted(self._instances)

    def detach(self) -> None:
        if self._bus is not None:
            self._bus.unsubscribe(EventType.TILE_ENTERED, self.on_tile_entered)
            self._bus = None

    def __len__(self) -> int:
        return len(self._instances)
