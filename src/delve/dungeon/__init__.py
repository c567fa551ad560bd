from .factory import TileFactory
from .store import TileStateStore
from .tiles import TileState

__all__ = ["TileFactory", "TileState", "TileStateStore"]
