from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class EncounterTemplate:
    """An encounter archetype that can be placed on a tile.

    What happens when the agent walks into one (combat, loot) is resolved
    outside the navigation core; the template only names it.
    """

    id: str
    name: str
    tier: int = 1


@dataclass(frozen=True)
class EncounterCandidate:
    """A template paired with its independent spawn chance, in percent."""

    template_id: str
    spawn_chance: float

    def __post_init__(self) -> None:
        if not (0.0 <= float(self.spawn_chance) <= 100.0):
            raise ValueError(
                f"Spawn chance for '{self.template_id}' must be within [0, 100], got {self.spawn_chance}"
            )


@dataclass(frozen=True)
class EncounterSpec:
    """An encounter placed on a tile at generation time."""

    template_id: str
    name: str

    def as_dict(self) -> Dict[str, str]:
        return {"template": self.template_id, "name": self.name}


class EncounterRegistry:
    """In-memory registry of known encounter templates.

    Built with an explicit iterable of templates, or with the default bestiary
    when none is given.
    """

    def __init__(self, templates: Optional[Iterable[EncounterTemplate]] = None) -> None:
        self._templates: Dict[str, EncounterTemplate] = {}
        if templates is not None:
            for t in templates:
                self.add(t)
        else:
            self._bootstrap_defaults()

    def add(self, template: EncounterTemplate) -> None:
        if template.id in self._templates:
            raise ValueError(f"Duplicate encounter template id: {template.id}")
        if template.tier < 1:
            raise ValueError(f"Encounter template '{template.id}' has invalid tier {template.tier}")
        self._templates[template.id] = template

    def get(self, template_id: str) -> EncounterTemplate:
        try:
            return self._templates[template_id]
        except KeyError as e:
            raise KeyError(f"Unknown encounter template id: {template_id}") from e

    def has(self, template_id: str) -> bool:
        return template_id in self._templates

    def ids(self) -> Tuple[str, ...]:
        return tuple(sorted(self._templates))

    def __len__(self) -> int:
        return len(self._templates)

    def _bootstrap_defaults(self) -> None:
        self.add(EncounterTemplate("slime", "Slime", 1))
        self.add(EncounterTemplate("rat", "Cave Rat", 1))
        self.add(EncounterTemplate("bat", "Cave Bat", 1))
        self.add(EncounterTemplate("skeleton", "Skeleton", 2))
        self.add(EncounterTemplate("zombie", "Zombie", 2))
        self.add(EncounterTemplate("ghoul", "Ghoul", 3))
