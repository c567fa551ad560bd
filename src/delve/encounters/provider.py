from __future__ import annotations

from typing import Iterable, Protocol, Sequence, Tuple

from ..core.grid import Coordinate
from .registry import EncounterCandidate


class EncounterProvider(Protocol):
    """Supplies the encounter candidates rolled for a tile on its first generation."""

    def candidates_for(self, coordinate: Coordinate) -> Sequence[EncounterCandidate]: ...


class StaticEncounterProvider:
    """Offers the same encounter table for every coordinate.

    This mirrors a tile prefab carrying a fixed list of possible enemies.
    """

    def __init__(self, candidates: Iterable[EncounterCandidate] = ()) -> None:
        self._candidates: Tuple[EncounterCandidate, ...] = tuple(candidates)

    @property
    def candidates(self) -> Tuple[EncounterCandidate, ...]:
        return self._candidates

    def candidates_for(self, coordinate: Coordinate) -> Sequence[EncounterCandidate]:
        return self._candidates


# Default table used when no settings are given.
DEFAULT_CANDIDATES: Tuple[EncounterCandidate, ...] = (
    EncounterCandidate("slime", 15.0),
    EncounterCandidate("rat", 10.0),
    EncounterCandidate("skeleton", 5.0),
)
