from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """The four cardinal moves. Values are unit vectors with y growing upward."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a direction name ("up", "Left") or its first letter ("u", "L")."""
        key = (text or "").strip().lower()
        for d in cls:
            if key in (d.name.lower(), d.name[0].lower()):
                return d
        raise ValueError(f"Unknown direction: {text!r}")


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Fixed order used wherever all four directions are iterated (random draws included).
DIRECTIONS: Tuple[Direction, ...] = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True, order=True)
class Coordinate:
    """Integer grid position in tile-size units. Ordered by x, then y."""

    x: int
    y: int

    def offset(self, direction: Direction, step: int = 1) -> "Coordinate":
        return Coordinate(self.x + direction.dx * step, self.y + direction.dy * step)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Connectivity:
    """Which directions movement out of a tile is permitted in."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_directions(cls, directions) -> "Connectivity":
        opened = set(directions)
        return cls(
            up=Direction.UP in opened,
            down=Direction.DOWN in opened,
            left=Direction.LEFT in opened,
            right=Direction.RIGHT in opened,
        )

    def allows(self, direction: Direction) -> bool:
        return getattr(self, direction.name.lower())

    def with_open(self, direction: Direction) -> "Connectivity":
        return Connectivity.from_directions(self.open_directions() + (direction,))

    def open_directions(self) -> Tuple[Direction, ...]:
        return tuple(d for d in DIRECTIONS if self.allows(d))

    def as_dict(self) -> dict:
        return {d.name.lower(): self.allows(d) for d in DIRECTIONS}


# The starting tile only ever leads up.
ORIGIN_CONNECTIVITY = Connectivity(up=True)


__all__ = ["Direction", "DIRECTIONS", "Coordinate", "Connectivity", "ORIGIN_CONNECTIVITY"]
