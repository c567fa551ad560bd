from .provider import DEFAULT_CANDIDATES, EncounterProvider, StaticEncounterProvider
from .registry import EncounterCandidate, EncounterRegistry, EncounterSpec, EncounterTemplate

__all__ = [
    "DEFAULT_CANDIDATES",
    "EncounterCandidate",
    "EncounterProvider",
    "EncounterRegistry",
    "EncounterSpec",
    "EncounterTemplate",
    "StaticEncounterProvider",
]
