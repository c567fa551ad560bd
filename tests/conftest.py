import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from delve.core.rng import RandomSource  # noqa: E402


class ScriptedRandom(RandomSource):
    """RandomSource returning a fixed value for every draw (cycling a list if given)."""

    def __init__(self, values) -> None:
        super().__init__(seed=0)
        self._values = list(values) if isinstance(values, (list, tuple)) else [values]
        self._i = 0

    def random(self) -> float:
        self._draws += 1
        value = self._values[self._i % len(self._values)]
        self._i += 1
        return value


@pytest.fixture
def all_open_rng():
    # 0.0 opens every direction and spawns every candidate with a non-zero chance.
    return ScriptedRandom(0.0)


@pytest.fixture
def all_closed_rng():
    # 0.99 closes every rolled direction; only the way back stays open.
    return ScriptedRandom(0.99)
