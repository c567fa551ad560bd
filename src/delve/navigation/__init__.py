from .controller import MoveOutcome, NavigationController, NavState
from .instances import TileInstance, TileInstanceRegistry

__all__ = [
    "MoveOutcome",
    "NavigationController",
    "NavState",
    "TileInstance",
    "TileInstanceRegistry",
]
