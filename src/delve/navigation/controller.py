from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.grid import DIRECTIONS, Coordinate, Direction
from ..dungeon.store import TileStateStore
from ..dungeon.tiles import TileState
from ..errors import InvalidMove, NavigationError
from ..events.event_bus import EventBus
from ..events.types import EventType, MoveKind, TileArrived, TileEntered

logger = logging.getLogger(__name__)


class NavState(Enum):
    IDLE = "idle"
    # Between a committed move and the presentation layer reporting arrival.
    MOVING = "moving"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of an accepted move."""

    kind: MoveKind
    coordinate: Coordinate
    tile: TileState

    @property
    def advanced(self) -> bool:
        return self.kind is MoveKind.ADVANCED

    @property
    def backtracked(self) -> bool:
        return self.kind is MoveKind.BACKTRACKED


class NavigationController:
    """Drives the agent through the dungeon one tile at a time.

    World state (generation, path history, position) is committed when a move
    is requested; the controller then stays MOVING until on_arrived() is called
    so a second request cannot race the first.

    The path history always starts at the origin and ends at the current
    coordinate. Stepping onto the coordinate just below the top of the history
    is a backtrack: the top is popped and nothing is generated.
    """

    def __init__(
        self,
        store: TileStateStore,
        tile_size: int = 10,
        origin: Coordinate = Coordinate(0, 0),
        bus: Optional[EventBus] = None,
    ) -> None:
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.store = store
        self.tile_size = tile_size
        self.origin = origin
        self.bus = bus if bus is not None else EventBus()
        self._state = NavState.IDLE
        self._last_kind: Optional[MoveKind] = None

        self.store.get_or_generate(origin, is_origin=True, entry_direction=None)
        self._path: List[Coordinate] = [origin]
        self._current = origin
        logger.info("Navigation started at origin %s (tile_size=%d)", origin, tile_size)

    # ------------------------ Queries ------------------------
    @property
    def state(self) -> NavState:
        return self._state

    @property
    def path(self) -> Tuple[Coordinate, ...]:
        return tuple(self._path)

    def current_coordinate(self) -> Coordinate:
        return self._current

    def current_tile(self) -> TileState:
        tile = self.store.lookup(self._current)
        if tile is None:
            raise NavigationError(f"No tile recorded for current coordinate {self._current}")
        return tile

    def tile_at(self, coordinate: Coordinate) -> Optional[TileState]:
        return self.store.lookup(coordinate)

    def can_move(self, direction: Direction) -> bool:
        return self._state is NavState.IDLE and self.current_tile().allows(direction)

    def available_directions(self) -> Tuple[Direction, ...]:
        return tuple(d for d in DIRECTIONS if self.can_move(d))

    # ------------------------ Commands ------------------------
    def request_move(self, direction: Direction) -> MoveOutcome:
        """Commit a move and return what happened.

        Raises:
            InvalidMove: the controller is MOVING or the current tile is closed
                in that direction. Nothing changes.
            GenerationFailure: the target tile could not be generated. Nothing
                changes; the controller stays IDLE where it was.
        """
        if self._state is not NavState.IDLE:
            logger.debug("Rejected move %s: still moving", direction.name)
            raise InvalidMove(direction, "a move is already in progress")
        if not self.current_tile().allows(direction):
            logger.debug("Rejected move %s from %s: path closed", direction.name, self._current)
            raise InvalidMove(direction, f"no path from {self._current}")

        target = self._current.offset(direction, self.tile_size)

        if len(self._path) > 1 and self._path[-2] == target:
            self._path.pop()
            self._current = target
            tile = self.store.lookup(target)
            if tile is None:
                raise NavigationError(f"Backtrack target {target} has no recorded tile")
            outcome = MoveOutcome(kind=MoveKind.BACKTRACKED, coordinate=target, tile=tile)
            newly_generated = False
            logger.debug("Backtracking to tile at %s", target)
        else:
            known = self.store.contains(target)
            tile = self.store.get_or_generate(target, is_origin=False, entry_direction=direction)
            self._path.append(target)
            self._current = target
            outcome = MoveOutcome(kind=MoveKind.ADVANCED, coordinate=target, tile=tile)
            newly_generated = not known
            logger.debug(
                "Advanced %s to %s (%s)", direction.name, target, "new" if newly_generated else "revisit"
            )

        self._check_path()
        self._state = NavState.MOVING
        self._last_kind = outcome.kind
        entered = TileEntered(
            coordinate=target,
            connectivity=tile.connectivity,
            encounters=tile.encounters,
            kind=outcome.kind,
            newly_generated=newly_generated,
        )
        self.bus.publish(EventType.TILE_ENTERED, entered.to_payload())
        return outcome

    def try_move(self, direction: Direction) -> Optional[MoveOutcome]:
        """Like request_move(), but returns None instead of raising InvalidMove."""
        try:
            return self.request_move(direction)
        except InvalidMove as exc:
            logger.debug("try_move: %s", exc)
            return None

    def on_arrived(self) -> None:
        """Called by the presentation layer once the move animation completes."""
        if self._state is NavState.IDLE:
            logger.warning("on_arrived() called while idle at %s; ignoring", self._current)
            return
        self._state = NavState.IDLE
        tile = self.current_tile()
        arrived = TileArrived(coordinate=self._current, encounters=tile.encounters, kind=self._last_kind)
        if arrived.has_encounters:
            logger.info("Arrived at %s with %d encounter(s)", self._current, len(tile.encounters))
        self.bus.publish(EventType.TILE_ARRIVED, arrived.to_payload())

    # ------------------------ Internals ------------------------
    def _check_path(self) -> None:
        if not self._path:
            raise NavigationError("Path history is empty")
        if self._path[-1] != self._current:
            raise NavigationError(
                f"Path history ends at {self._path[-1]} but agent is at {self._current}"
            )
