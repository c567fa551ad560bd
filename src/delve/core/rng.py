from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    The single random stream shared by tile generation.

    - injectable, so tests can pass a seeded instance
    - seedable for reproducible dungeons
    - state can be captured and restored to replay a generation
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")
        self._draws = 0

    @property
    def draws(self) -> int:
        """Number of values drawn from this stream so far."""
        return self._draws

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        self._draws += 1
        return self._rng.random()

    def chance(self, probability: float) -> bool:
        """Bernoulli draw: True with the given probability in [0, 1]."""
        return self.random() < probability

    def percent_chance(self, percent: float) -> bool:
        """Bernoulli draw against a percentage in [0, 100]."""
        return self.random() * 100.0 < percent

    def state(self) -> Any:
        """Return the internal PRNG state for replay."""
        return (self._rng.getstate(), self._draws)

    def set_state(self, state: Any) -> None:
        """Restore a state previously returned by state()."""
        internal, draws = state
        self._rng.setstate(internal)
        self._draws = draws


__all__ = ["RandomSource"]
