"""
Core value types for Delve.

Grid coordinates, cardinal directions and tile connectivity, plus the shared
random stream used by generation.
"""
from .grid import DIRECTIONS, ORIGIN_CONNECTIVITY, Connectivity, Coordinate, Direction
from .rng import RandomSource

__all__ = [
    "Connectivity",
    "Coordinate",
    "Direction",
    "DIRECTIONS",
    "ORIGIN_CONNECTIVITY",
    "RandomSource",
]
