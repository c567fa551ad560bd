from delve.core.grid import Coordinate, Direction
from delve.debug import render_ascii
from delve.dungeon.factory import TileFactory
from delve.dungeon.store import TileStateStore
from delve.encounters import EncounterCandidate, StaticEncounterProvider
from delve.navigation import NavigationController


def test_empty_store_renders_nothing(all_open_rng):
    assert render_ascii(TileStateStore(TileFactory(all_open_rng))) == ""


def test_renders_explored_tiles_top_down(all_open_rng):
    nav = NavigationController(TileStateStore(TileFactory(all_open_rng)))
    nav.request_move(Direction.UP)
    nav.on_arrived()
    nav.request_move(Direction.RIGHT)
    nav.on_arrived()

    text = render_ascii(nav.store, nav.current_coordinate(), tile_size=10)
    assert text.splitlines() == ["#-@", "|", "O"]


def test_encounter_tiles_marked(all_open_rng):
    factory = TileFactory(all_open_rng, encounters=StaticEncounterProvider([EncounterCandidate("rat", 100)]))
    nav = NavigationController(TileStateStore(factory))
    nav.request_move(Direction.UP)
    text = render_ascii(nav.store, current=Coordinate(0, 0))
    assert text.splitlines() == ["E", "|", "@"]
