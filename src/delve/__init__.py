"""
Delve: an endless tile dungeon generated one tile at a time.

This package provides the headless exploration core:
- Coordinate / Direction / Connectivity value types
- TileFactory rolling each tile's paths and encounters exactly once
- TileStateStore remembering every generated tile by coordinate
- NavigationController moving the agent, detecting backtracks and keeping
  the path history

Rendering, input and combat layers subscribe to the EventBus notifications
and query the controller.
"""
from .core.grid import Connectivity, Coordinate, Direction
from .core.rng import RandomSource
from .dungeon.factory import TileFactory
from .dungeon.store import TileStateStore
from .dungeon.tiles import TileState
from .errors import ConfigError, DelveError, GenerationFailure, InvalidMove, NavigationError
from .events import EventBus, EventType, MoveKind
from .navigation.controller import MoveOutcome, NavigationController, NavState

__all__ = [
    "Connectivity",
    "Coordinate",
    "Direction",
    "RandomSource",
    "TileFactory",
    "TileStateStore",
    "TileState",
    "DelveError",
    "NavigationError",
    "InvalidMove",
    "GenerationFailure",
    "ConfigError",
    "EventBus",
    "EventType",
    "MoveKind",
    "MoveOutcome",
    "NavigationController",
    "NavState",
]
