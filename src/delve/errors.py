from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .core.grid import Coordinate, Direction


class DelveError(Exception):
    """Base error for Delve domain exceptions."""


class NavigationError(DelveError):
    """Raised when the navigation state machine is asked to do something impossible."""


class InvalidMove(NavigationError):
    """Raised when a move is blocked by connectivity or the controller is busy.

    No state is mutated when this is raised.
    """

    def __init__(self, direction: "Direction", reason: str) -> None:
        super().__init__(f"Cannot move {direction.name}: {reason}")
        self.direction = direction
        self.reason = reason


class GenerationFailure(DelveError):
    """Raised when a tile cannot be generated for a coordinate."""

    def __init__(self, message: str, coordinate: Optional["Coordinate"] = None) -> None:
        super().__init__(message)
        self.coordinate = coordinate


class ConfigError(DelveError):
    """Raised when settings or the encounter table are invalid."""

    def __init__(self, message: str, errors: Optional[list[str]] = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            parts.append(f" - {e}")
        return "\n".join(parts)
