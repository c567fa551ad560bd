from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .config import Settings
from .core.grid import Coordinate, Direction
from .core.rng import RandomSource
from .dungeon.factory import TileFactory
from .dungeon.store import TileStateStore
from .encounters.provider import StaticEncounterProvider
from .encounters.registry import EncounterRegistry
from .events.event_bus import EventBus
from .navigation.controller import NavigationController
from .navigation.instances import TileInstanceRegistry

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything needed to explore one dungeon, wired together."""

    settings: Settings
    rng: RandomSource
    store: TileStateStore
    bus: EventBus
    controller: NavigationController
    instances: TileInstanceRegistry


def build_session(
    settings: Optional[Settings] = None,
    registry: Optional[EncounterRegistry] = None,
    bus: Optional[EventBus] = None,
) -> Session:
    """Wire a RandomSource, TileFactory, TileStateStore and NavigationController from settings."""
    settings = settings or Settings()
    settings.validate()
    rng = RandomSource(settings.seed)
    factory = TileFactory(
        rng,
        encounters=StaticEncounterProvider(settings.encounter_candidates()),
        registry=registry,
        open_probability=settings.open_probability,
    )
    store = TileStateStore(factory)
    bus = bus if bus is not None else EventBus()
    instances = TileInstanceRegistry(bus)
    controller = NavigationController(
        store,
        tile_size=settings.tile_size,
        origin=Coordinate(*settings.origin),
        bus=bus,
    )
    instances.spawn(controller.origin)
    return Session(settings=settings, rng=rng, store=store, bus=bus, controller=controller, instances=instances)


def explore(session: Session, moves: Iterable[Direction]) -> Dict[str, Any]:
    """Walk a sequence of moves headlessly and return a serializable summary.

    Blocked moves are skipped and reported; every accepted move is completed
    with on_arrived() straight away.
    """
    nav = session.controller
    skipped: List[Dict[str, Any]] = []
    steps: List[Dict[str, Any]] = []
    for i, direction in enumerate(moves):
        outcome = nav.try_move(direction)
        if outcome is None:
            skipped.append(
                {"index": i, "direction": direction.name.lower(), "at": list(nav.current_coordinate().as_tuple())}
            )
            continue
        steps.append(
            {"direction": direction.name.lower(), "kind": outcome.kind.value, "to": list(outcome.coordinate.as_tuple())}
        )
        nav.on_arrived()

    return {
        "seed": session.settings.seed,
        "tile_size": nav.tile_size,
        "current": list(nav.current_coordinate().as_tuple()),
        "path": [list(c.as_tuple()) for c in nav.path],
        "steps": steps,
        "skipped": skipped,
        "tiles": [s.as_dict() for s in session.store.states()],
    }
