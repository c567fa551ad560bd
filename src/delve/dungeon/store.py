from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from ..core.grid import Coordinate, Direction
from .factory import TileFactory
from .tiles import TileState

logger = logging.getLogger(__name__)


class TileStateStore:
    """Ledger of every generated tile, keyed by coordinate.

    A coordinate is handed to the factory at most once for the life of the
    store; later requests return the recorded state unchanged. Nothing is ever
    evicted.
    """

    def __init__(self, factory: TileFactory) -> None:
        self.factory = factory
        self._states: Dict[Coordinate, TileState] = {}
        self._generated = 0

    def get_or_generate(
        self,
        coordinate: Coordinate,
        is_origin: bool,
        entry_direction: Optional[Direction],
    ) -> TileState:
        cached = self._states.get(coordinate)
        if cached is not None:
            logger.debug("Restoring visited tile at %s", coordinate)
            return cached
        # A GenerationFailure propagates before anything is recorded.
        state = self.factory.generate(coordinate, is_origin=is_origin, entry_direction=entry_direction)
        self._states[coordinate] = state
        self._generated += 1
        logger.debug("Stored new tile at %s (%d tiles known)", coordinate, len(self._states))
        return state

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate in self._states

    def lookup(self, coordinate: Coordinate) -> Optional[TileState]:
        return self._states.get(coordinate)

    @property
    def generated_count(self) -> int:
        """How many times the factory has been invoked successfully."""
        return self._generated

    def coordinates(self) -> List[Coordinate]:
        return sorted(self._states)

    def states(self) -> Iterator[TileState]:
        for coordinate in self.coordinates():
            yield self._states[coordinate]

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._states

    def __len__(self) -> int:
        return len(self._states)
