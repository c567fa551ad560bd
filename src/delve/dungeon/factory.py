from __future__ import annotations

import logging
from typing import List, Optional

from ..core.grid import DIRECTIONS, ORIGIN_CONNECTIVITY, Connectivity, Coordinate, Direction
from ..core.rng import RandomSource
from ..encounters.provider import EncounterProvider, StaticEncounterProvider
from ..encounters.registry import EncounterRegistry, EncounterSpec, EncounterTemplate
from ..errors import GenerationFailure
from .tiles import TileState

logger = logging.getLogger(__name__)


class TileFactory:
    """Rolls the connectivity and encounters of a tile on its first visit.

    Every random value comes from the injected RandomSource, drawn in a fixed
    order: the four directions (UP, DOWN, LEFT, RIGHT), then one draw per
    encounter candidate. Given the same stream state the same tile comes out.

    Usage:
      factory = TileFactory(RandomSource(seed=7))
      state = factory.generate(Coordinate(0, 10), is_origin=False, entry_direction=Direction.UP)
    """

    def __init__(
        self,
        rng: RandomSource,
        encounters: Optional[EncounterProvider] = None,
        registry: Optional[EncounterRegistry] = None,
        open_probability: float = 0.5,
    ) -> None:
        if not (0.0 <= open_probability <= 1.0):
            raise ValueError(f"open_probability must be within [0, 1], got {open_probability}")
        self.rng = rng
        self.encounters = encounters if encounters is not None else StaticEncounterProvider()
        self.registry = registry if registry is not None else EncounterRegistry()
        self.open_probability = open_probability

    def generate(
        self,
        coordinate: Coordinate,
        is_origin: bool,
        entry_direction: Optional[Direction],
    ) -> TileState:
        if is_origin:
            logger.debug("Generating origin tile at %s", coordinate)
            return TileState(coordinate=coordinate, connectivity=ORIGIN_CONNECTIVITY)

        if entry_direction is None:
            raise ValueError(f"Non-origin tile {coordinate} requires an entry direction")

        # Resolve templates before touching the stream so a failure consumes no draws.
        candidates = list(self.encounters.candidates_for(coordinate))
        templates: List[EncounterTemplate] = []
        for candidate in candidates:
            if not self.registry.has(candidate.template_id):
                logger.error(
                    "Cannot generate tile %s: unknown encounter template '%s'",
                    coordinate,
                    candidate.template_id,
                )
                raise GenerationFailure(
                    f"Unknown encounter template '{candidate.template_id}' for tile {coordinate}",
                    coordinate=coordinate,
                )
            templates.append(self.registry.get(candidate.template_id))

        opened = [d for d in DIRECTIONS if self.rng.chance(self.open_probability)]
        connectivity = Connectivity.from_directions(opened)
        # The way back must stay open, whatever was rolled.
        connectivity = connectivity.with_open(entry_direction.opposite())

        placed = tuple(
            EncounterSpec(template_id=t.id, name=t.name)
            for candidate, t in zip(candidates, templates)
            if self.rng.percent_chance(candidate.spawn_chance)
        )

        logger.debug(
            "Generated tile %s (entry=%s): open=%s encounters=%s",
            coordinate,
            entry_direction.name,
            [d.name for d in connectivity.open_directions()],
            [e.template_id for e in placed],
        )
        return TileState(
            coordinate=coordinate,
            connectivity=connectivity,
            encounters=placed,
            entry_direction=entry_direction,
        )
