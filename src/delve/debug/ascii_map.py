from __future__ import annotations

import logging
from typing import List, Optional

from ..core.grid import Coordinate, Direction
from ..dungeon.store import TileStateStore

logger = logging.getLogger(__name__)

CURRENT = "@"
ORIGIN = "O"
ENCOUNTER = "E"
EXPLORED = "#"
EMPTY = " "


def render_ascii(store: TileStateStore, current: Optional[Coordinate] = None, tile_size: int = 10) -> str:
    """Draw every known tile as text, top row being the highest y.

    Each tile occupies a cell two characters apart; connectors ``|`` and ``-``
    mark a direction open from the tile on the lower/left side. An empty store
    renders as an empty string.
    """
    coords = store.coordinates()
    if not coords:
        return ""
    xs = [c.x // tile_size for c in coords]
    ys = [c.y // tile_size for c in coords]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    width = (max_x - min_x) * 2 + 1
    height = (max_y - min_y) * 2 + 1
    canvas: List[List[str]] = [[EMPTY] * width for _ in range(height)]

    def cell(gx: int, gy: int):
        # Row 0 is the top of the map.
        return (max_y - gy) * 2, (gx - min_x) * 2

    for state in store.states():
        gx, gy = state.coordinate.x // tile_size, state.coordinate.y // tile_size
        row, col = cell(gx, gy)
        if current is not None and state.coordinate == current:
            mark = CURRENT
        elif state.is_origin:
            mark = ORIGIN
        elif state.has_encounters:
            mark = ENCOUNTER
        else:
            mark = EXPLORED
        canvas[row][col] = mark
        if state.allows(Direction.UP) and row > 0:
            canvas[row - 1][col] = "|"
        if state.allows(Direction.RIGHT) and col < width - 1:
            canvas[row][col + 1] = "-"

    return "\n".join("".join(line).rstrip() for line in canvas)
