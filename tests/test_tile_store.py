import pytest

from delve.core.grid import Coordinate, Direction
from delve.core.rng import RandomSource
from delve.dungeon.factory import TileFactory
from delve.dungeon.store import TileStateStore
from delve.encounters import EncounterCandidate, StaticEncounterProvider
from delve.errors import GenerationFailure


def make_store(seed=1, candidates=()):
    rng = RandomSource(seed)
    factory = TileFactory(rng, encounters=StaticEncounterProvider(candidates))
    return TileStateStore(factory), rng


def test_get_or_generate_caches_and_advances_stream_once():
    store, rng = make_store(candidates=[EncounterCandidate("rat", 50)])
    target = Coordinate(0, 10)
    first = store.get_or_generate(target, is_origin=False, entry_direction=Direction.UP)
    draws = rng.draws
    second = store.get_or_generate(target, is_origin=False, entry_direction=Direction.UP)
    assert second is first
    assert rng.draws == draws
    assert store.generated_count == 1


def test_cached_state_wins_over_different_arguments():
    store, rng = make_store()
    target = Coordinate(10, 0)
    first = store.get_or_generate(target, is_origin=False, entry_direction=Direction.RIGHT)
    again = store.get_or_generate(target, is_origin=True, entry_direction=None)
    assert again is first
    assert again.entry_direction is Direction.RIGHT


def test_contains_lookup_and_len():
    store, _ = make_store()
    c = Coordinate(0, 0)
    assert not store.contains(c)
    assert store.lookup(c) is None
    state = store.get_or_generate(c, is_origin=True, entry_direction=None)
    assert store.contains(c)
    assert c in store
    assert store.lookup(c) is state
    assert len(store) == 1


def test_coordinates_sorted():
    store, _ = make_store()
    for c in (Coordinate(10, 0), Coordinate(-10, 5), Coordinate(0, 0)):
        store.get_or_generate(c, is_origin=False, entry_direction=Direction.UP)
    assert store.coordinates() == [Coordinate(-10, 5), Coordinate(0, 0), Coordinate(10, 0)]
    assert [s.coordinate for s in store.states()] == store.coordinates()


def test_failed_generation_stores_nothing():
    store, _ = make_store(candidates=[EncounterCandidate("nope", 10)])
    with pytest.raises(GenerationFailure):
        store.get_or_generate(Coordinate(0, 10), is_origin=False, entry_direction=Direction.UP)
    assert not store.contains(Coordinate(0, 10))
    assert store.generated_count == 0
